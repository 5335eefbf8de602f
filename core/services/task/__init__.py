from .query import PhaseSummary, ScheduleSnapshot
from .service import TaskService

__all__ = ["TaskService", "ScheduleSnapshot", "PhaseSummary"]
