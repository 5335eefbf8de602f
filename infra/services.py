from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from core.services.baseline import BaselineService
from core.services.task import TaskService
from core.services.work_calendar import WorkCalendarService
from infra.db.repositories import (
    SqlAlchemyBaselineRepository,
    SqlAlchemyDependencyRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyWorkdayExceptionRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    task_service: TaskService
    work_calendar_service: WorkCalendarService
    baseline_service: BaselineService


def build_services(session: Session) -> ServiceGraph:
    task_repo = SqlAlchemyTaskRepository(session)
    dependency_repo = SqlAlchemyDependencyRepository(session)
    exception_repo = SqlAlchemyWorkdayExceptionRepository(session)
    baseline_repo = SqlAlchemyBaselineRepository(session)

    task_service = TaskService(session, task_repo, dependency_repo, exception_repo)
    work_calendar_service = WorkCalendarService(session, exception_repo, task_service)
    baseline_service = BaselineService(session, baseline_repo, task_service)
    return ServiceGraph(
        session=session,
        task_service=task_service,
        work_calendar_service=work_calendar_service,
        baseline_service=baseline_service,
    )


__all__ = ["ServiceGraph", "build_services"]
