from .baseline import BaselineService
from .scheduling import (
    CPMNode,
    DateUpdate,
    compute_cpm,
    find_critical_path,
    propagate_dates,
    would_create_cycle,
)
from .task import PhaseSummary, ScheduleSnapshot, TaskService
from .work_calendar import (
    WorkCalendarEngine,
    WorkCalendarService,
    add_workdays,
    count_workdays,
    is_working_day,
    shift_workdays,
)

__all__ = [
    "BaselineService",
    "TaskService",
    "ScheduleSnapshot",
    "PhaseSummary",
    "WorkCalendarEngine",
    "WorkCalendarService",
    "is_working_day",
    "add_workdays",
    "count_workdays",
    "shift_workdays",
    "would_create_cycle",
    "compute_cpm",
    "find_critical_path",
    "propagate_dates",
    "CPMNode",
    "DateUpdate",
]
