from core.domain.baseline import ScheduleBaseline
from core.domain.calendar import WorkdayException
from core.domain.enums import (
    DependencyType,
    ExceptionCategory,
    ExceptionRecurrence,
    ExceptionType,
    TaskStatus,
)
from core.domain.identifiers import generate_id
from core.domain.task import ScheduleTask, TaskDependency

__all__ = [
    "generate_id",
    "TaskStatus",
    "DependencyType",
    "ExceptionType",
    "ExceptionCategory",
    "ExceptionRecurrence",
    "ScheduleTask",
    "TaskDependency",
    "WorkdayException",
    "ScheduleBaseline",
]
