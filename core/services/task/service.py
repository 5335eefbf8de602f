from __future__ import annotations

from sqlalchemy.orm import Session

from core.interfaces import DependencyRepository, TaskRepository, WorkdayExceptionRepository
from core.services.task.dependency import TaskDependencyMixin
from core.services.task.lifecycle import TaskLifecycleMixin
from core.services.task.query import TaskQueryMixin
from core.services.task.schedule import TaskScheduleMixin
from core.services.task.validation import TaskValidationMixin


class TaskService(
    TaskLifecycleMixin,
    TaskDependencyMixin,
    TaskScheduleMixin,
    TaskQueryMixin,
    TaskValidationMixin,
):
    def __init__(
        self,
        session: Session,
        task_repo: TaskRepository,
        dependency_repo: DependencyRepository,
        exception_repo: WorkdayExceptionRepository,
    ):
        self._session: Session = session
        self._task_repo: TaskRepository = task_repo
        self._dependency_repo: DependencyRepository = dependency_repo
        self._exception_repo: WorkdayExceptionRepository = exception_repo
