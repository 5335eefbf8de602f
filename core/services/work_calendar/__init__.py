from .engine import (
    WorkCalendarEngine,
    add_workdays,
    count_workdays,
    is_working_day,
    shift_workdays,
)
from .service import WorkCalendarService

__all__ = [
    "WorkCalendarEngine",
    "WorkCalendarService",
    "is_working_day",
    "add_workdays",
    "count_workdays",
    "shift_workdays",
]
