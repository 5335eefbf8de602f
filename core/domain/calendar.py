from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import ExceptionCategory, ExceptionRecurrence, ExceptionType
from core.domain.identifiers import generate_id
from core.exceptions import ValidationError


@dataclass
class WorkdayException:
    """A named override of the default Mon-Fri calendar for one project."""

    id: str
    project_id: str
    title: str
    start_date: date
    end_date: date
    type: ExceptionType = ExceptionType.NON_WORKING
    category: ExceptionCategory = ExceptionCategory.COMPANY_HOLIDAY
    # stored only; the calendar does not repeat yearly ranges
    recurrence: ExceptionRecurrence = ExceptionRecurrence.ONE_TIME
    notes: Optional[str] = None

    @staticmethod
    def create(
        project_id: str,
        title: str,
        start_date: date,
        end_date: date,
        type: ExceptionType = ExceptionType.NON_WORKING,
        category: ExceptionCategory = ExceptionCategory.COMPANY_HOLIDAY,
        recurrence: ExceptionRecurrence = ExceptionRecurrence.ONE_TIME,
        notes: Optional[str] = None,
    ) -> "WorkdayException":
        if end_date < start_date:
            raise ValidationError(
                "Exception end date cannot be before start date.",
                code="EXCEPTION_INVALID_RANGE",
            )
        return WorkdayException(
            id=generate_id(),
            project_id=project_id,
            title=title,
            start_date=start_date,
            end_date=end_date,
            type=type,
            category=category,
            recurrence=recurrence,
            notes=notes,
        )

    def covers(self, d: date) -> bool:
        return self.start_date <= d <= self.end_date


__all__ = ["WorkdayException"]
