# core/services/work_calendar/service.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import WorkdayExceptionRepository
from core.models import (
    ExceptionCategory,
    ExceptionRecurrence,
    ExceptionType,
    WorkdayException,
)
from core.services.work_calendar.engine import DateLike, as_date

if TYPE_CHECKING:
    from core.services.task import TaskService

logger = logging.getLogger(__name__)


class WorkCalendarService:
    """
    High-level API for a project's non-working-day exceptions.
    The engine is read-only; all writes go through this service, and every
    write reschedules the project so computed end dates stay in step.
    """

    def __init__(
        self,
        session: Session,
        exception_repo: WorkdayExceptionRepository,
        task_service: "TaskService",
    ):
        self._session: Session = session
        self._repo: WorkdayExceptionRepository = exception_repo
        self._task_service = task_service

    def list_exceptions(self, project_id: str) -> List[WorkdayException]:
        return sorted(self._repo.list_by_project(project_id), key=lambda e: e.start_date)

    def add_exception(
        self,
        project_id: str,
        title: str,
        start_date: DateLike,
        end_date: DateLike,
        type: ExceptionType = ExceptionType.NON_WORKING,
        category: ExceptionCategory = ExceptionCategory.COMPANY_HOLIDAY,
        recurrence: ExceptionRecurrence = ExceptionRecurrence.ONE_TIME,
        notes: Optional[str] = None,
    ) -> WorkdayException:
        if not title or not title.strip():
            raise ValidationError("Exception title cannot be empty.", code="EXCEPTION_TITLE_EMPTY")
        exc = WorkdayException.create(
            project_id=project_id,
            title=title.strip(),
            start_date=as_date(start_date),
            end_date=as_date(end_date),
            type=ExceptionType(type),
            category=ExceptionCategory(category),
            recurrence=ExceptionRecurrence(recurrence),
            notes=notes,
        )
        try:
            self._repo.add(exc)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            raise e
        logger.info(f"Added workday exception {exc.id} ({exc.start_date}..{exc.end_date}) to project {project_id}")
        self._after_change(project_id)
        return exc

    def update_exception(
        self,
        exception_id: str,
        title: str | None = None,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
        type: ExceptionType | None = None,
        category: ExceptionCategory | None = None,
        recurrence: ExceptionRecurrence | None = None,
        notes: str | None = None,
    ) -> WorkdayException:
        exc = self._repo.get(exception_id)
        if not exc:
            raise NotFoundError("Workday exception not found.", code="EXCEPTION_NOT_FOUND")

        if title is not None:
            if not title.strip():
                raise ValidationError("Exception title cannot be empty.", code="EXCEPTION_TITLE_EMPTY")
            exc.title = title.strip()
        if start_date is not None:
            exc.start_date = as_date(start_date)
        if end_date is not None:
            exc.end_date = as_date(end_date)
        if exc.end_date < exc.start_date:
            raise ValidationError(
                "Exception end date cannot be before start date.",
                code="EXCEPTION_INVALID_RANGE",
            )
        if type is not None:
            exc.type = ExceptionType(type)
        if category is not None:
            exc.category = ExceptionCategory(category)
        if recurrence is not None:
            exc.recurrence = ExceptionRecurrence(recurrence)
        if notes is not None:
            exc.notes = notes

        try:
            self._repo.update(exc)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            raise e
        self._after_change(exc.project_id)
        return exc

    def delete_exception(self, exception_id: str) -> None:
        exc = self._repo.get(exception_id)
        if not exc:
            raise NotFoundError("Workday exception not found.", code="EXCEPTION_NOT_FOUND")
        try:
            self._repo.delete(exception_id)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            raise e
        logger.info(f"Deleted workday exception {exception_id} from project {exc.project_id}")
        self._after_change(exc.project_id)

    def _after_change(self, project_id: str) -> None:
        self._task_service.reschedule_project(project_id)
        domain_events.schedule_changed.emit(project_id)
        domain_events.exceptions_changed.emit(project_id)
