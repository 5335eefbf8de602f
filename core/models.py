# core/models.py
from core.domain import (
    ScheduleBaseline,
    DependencyType,
    ExceptionCategory,
    ExceptionRecurrence,
    ExceptionType,
    ScheduleTask,
    TaskDependency,
    TaskStatus,
    WorkdayException,
    generate_id,
)

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
