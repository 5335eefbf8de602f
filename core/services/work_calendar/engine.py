# core/services/work_calendar/engine.py
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Tuple, Union

from core.domain.calendar import WorkdayException

DateLike = Union[date, str]

# Monday=0 ... Sunday=6
WEEKEND_DAYS = frozenset({5, 6})


def as_date(value: DateLike) -> date:
    """Accept a date or an ISO ``YYYY-MM-DD`` string; anything else fails fast."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


class WorkCalendarEngine:
    """
    Working-day arithmetic for one project's exception set.

    A date is non-working when it falls on Saturday/Sunday or inside the
    inclusive range of any supplied exception, whatever its type. Yearly
    recurrence is not expanded: the stored range must itself cover the
    target date.
    """

    def __init__(self, exceptions: Iterable[WorkdayException] = ()):
        self._exceptions: Tuple[WorkdayException, ...] = tuple(exceptions)

    def is_working_day(self, d: DateLike) -> bool:
        d = as_date(d)
        if d.weekday() in WEEKEND_DAYS:
            return False
        return not any(e.covers(d) for e in self._exceptions)

    def next_working_day(self, d: DateLike, include_today: bool = True) -> date:
        current = as_date(d)
        if not include_today:
            current += timedelta(days=1)
        while not self.is_working_day(current):
            current += timedelta(days=1)
        return current

    def add_workdays(self, start: DateLike, workdays: int) -> date:
        """
        End date of a task spanning ``workdays`` working days from ``start``.

        The start date counts as the first unit when it is a working day, so
        a 1-workday task ends on its start date. Zero or negative durations
        (milestones) return ``start`` unchanged.
        """
        current = as_date(start)
        if workdays <= 0:
            return current

        remaining = workdays
        if self.is_working_day(current):
            remaining -= 1
        while remaining > 0:
            current += timedelta(days=1)
            if self.is_working_day(current):
                remaining -= 1
        return current

    def count_workdays(self, start: DateLike, end: DateLike) -> int:
        start, end = as_date(start), as_date(end)
        if end < start:
            return 0
        current = start
        count = 0
        while current <= end:
            if self.is_working_day(current):
                count += 1
            current += timedelta(days=1)
        return count

    def shift_workdays(self, d: DateLike, n: int) -> date:
        """Move ``|n|`` working days forward (n > 0) or backward, never counting ``d`` itself."""
        current = as_date(d)
        step = timedelta(days=1 if n >= 0 else -1)
        remaining = abs(n)
        while remaining > 0:
            current += step
            if self.is_working_day(current):
                remaining -= 1
        return current


def is_working_day(d: DateLike, exceptions: Iterable[WorkdayException] = ()) -> bool:
    return WorkCalendarEngine(exceptions).is_working_day(d)


def add_workdays(
    start: DateLike, workdays: int, exceptions: Iterable[WorkdayException] = ()
) -> date:
    return WorkCalendarEngine(exceptions).add_workdays(start, workdays)


def count_workdays(
    start: DateLike, end: DateLike, exceptions: Iterable[WorkdayException] = ()
) -> int:
    return WorkCalendarEngine(exceptions).count_workdays(start, end)


def shift_workdays(d: DateLike, n: int, exceptions: Iterable[WorkdayException] = ()) -> date:
    return WorkCalendarEngine(exceptions).shift_workdays(d, n)


__all__ = [
    "WorkCalendarEngine",
    "as_date",
    "is_working_day",
    "add_workdays",
    "count_workdays",
    "shift_workdays",
]
