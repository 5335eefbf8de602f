from __future__ import annotations

from enum import Enum


class TaskStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETE = "COMPLETE"
    BLOCKED = "BLOCKED"


class DependencyType(str, Enum):
    FINISH_TO_START = "FS"
    FINISH_TO_FINISH = "FF"
    START_TO_START = "SS"
    START_TO_FINISH = "SF"


class ExceptionType(str, Enum):
    NON_WORKING = "non_working"
    HOLIDAY = "holiday"
    WORKING = "working"


class ExceptionCategory(str, Enum):
    NATIONAL_HOLIDAY = "national_holiday"
    STATE_HOLIDAY = "state_holiday"
    VACATION_DAY = "vacation_day"
    COMPANY_HOLIDAY = "company_holiday"
    WEATHER_DAY = "weather_day"


class ExceptionRecurrence(str, Enum):
    ONE_TIME = "one_time"
    YEARLY = "yearly"


__all__ = [
    "TaskStatus",
    "DependencyType",
    "ExceptionType",
    "ExceptionCategory",
    "ExceptionRecurrence",
]
