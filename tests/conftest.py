# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from infra.db.base import init_db
from infra.db.repositories import (
    SqlAlchemyBaselineRepository,
    SqlAlchemyDependencyRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyWorkdayExceptionRepository,
)

from core.services.baseline import BaselineService
from core.services.task import TaskService
from core.services.work_calendar import WorkCalendarService


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    init_db(engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    # Recreate what build_services() does, but with the test session
    task_repo = SqlAlchemyTaskRepository(session)
    dependency_repo = SqlAlchemyDependencyRepository(session)
    exception_repo = SqlAlchemyWorkdayExceptionRepository(session)
    baseline_repo = SqlAlchemyBaselineRepository(session)

    task_service = TaskService(session, task_repo, dependency_repo, exception_repo)
    work_calendar_service = WorkCalendarService(session, exception_repo, task_service)
    baseline_service = BaselineService(session, baseline_repo, task_service)

    return {
        "session": session,
        "task_service": task_service,
        "work_calendar_service": work_calendar_service,
        "task_repo": task_repo,
        "dependency_repo": dependency_repo,
        "exception_repo": exception_repo,
        "baseline_service": baseline_service,
        "baseline_repo": baseline_repo,
    }
