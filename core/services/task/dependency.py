from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, NotFoundError
from core.interfaces import DependencyRepository, TaskRepository, WorkdayExceptionRepository
from core.models import DependencyType, TaskDependency
from core.services.scheduling import propagate_dates, would_create_cycle

logger = logging.getLogger(__name__)


class TaskDependencyMixin:
    _session: Session
    _task_repo: TaskRepository
    _dependency_repo: DependencyRepository
    _exception_repo: WorkdayExceptionRepository

    def add_dependency(
        self,
        project_id: str,
        predecessor_id: str,
        successor_id: str,
        dependency_type: DependencyType = DependencyType.FINISH_TO_START,
        lag_days: int = 0,
    ) -> TaskDependency:
        self._validate_not_self_dependency(predecessor_id, successor_id)

        tasks = self._task_repo.list_by_project(project_id)
        task_ids = {t.id for t in tasks}
        if predecessor_id not in task_ids:
            raise NotFoundError("Predecessor task not found", code="TASK_NOT_FOUND")
        if successor_id not in task_ids:
            raise NotFoundError("Successor task not found", code="TASK_NOT_FOUND")

        deps = self._project_dependencies(tasks)
        if would_create_cycle(deps, predecessor_id, successor_id):
            raise BusinessRuleError(
                "Adding this dependency would create a circular dependency.",
                code="DEPENDENCY_CYCLE",
            )

        dep = TaskDependency.create(
            predecessor_id, successor_id, DependencyType(dependency_type), int(lag_days)
        )
        deps.append(dep)
        exceptions = self._exception_repo.list_by_project(project_id)
        updates = propagate_dates(predecessor_id, tasks, deps, exceptions)

        try:
            self._dependency_repo.add(dep)
            self._apply_date_updates({t.id: t for t in tasks}, updates)
            self._refresh_critical_flags(tasks, deps)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            raise exc

        logger.info(
            f"Added {dep.dependency_type.value} dependency {predecessor_id} -> {successor_id} "
            f"(lag {dep.lag_days}); {len(updates)} task(s) moved"
        )
        domain_events.schedule_changed.emit(project_id)
        return dep

    def remove_dependency(self, dep_id: str) -> None:
        dep = self._dependency_repo.get(dep_id)
        if not dep:
            raise NotFoundError("Dependency not found.", code="DEPENDENCY_NOT_FOUND")
        pred = self._task_repo.get(dep.predecessor_task_id)
        succ = self._task_repo.get(dep.successor_task_id)
        project_id = pred.project_id if pred else (succ.project_id if succ else None)

        try:
            self._dependency_repo.delete(dep_id)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            raise exc

        if project_id:
            self.recalculate_critical_path(project_id)
            domain_events.schedule_changed.emit(project_id)

    def list_dependencies(self, project_id: str) -> List[TaskDependency]:
        return self._project_dependencies(self._task_repo.list_by_project(project_id))
