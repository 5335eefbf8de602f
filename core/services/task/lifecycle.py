from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import DependencyRepository, TaskRepository, WorkdayExceptionRepository
from core.models import ScheduleTask, TaskStatus
from core.services.scheduling import propagate_dates
from core.services.work_calendar.engine import DateLike, WorkCalendarEngine, as_date


logger = logging.getLogger(__name__)


class TaskLifecycleMixin:
    _session: Session
    _task_repo: TaskRepository
    _dependency_repo: DependencyRepository
    _exception_repo: WorkdayExceptionRepository

    def _require_task(self, task_id: str) -> ScheduleTask:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        return task

    def create_task(
        self,
        project_id: str,
        title: str,
        start_date: DateLike,
        workdays: int,
        phase: str = "",
        is_milestone: bool = False,
        percent_complete: int = 0,
    ) -> ScheduleTask:
        self._validate_task_title(title)
        self._validate_workdays(workdays)
        self._validate_percent_complete(percent_complete)

        existing = self._task_repo.list_by_project(project_id)
        next_order = max((t.sort_order for t in existing), default=-1) + 1

        task = ScheduleTask.create(
            project_id=project_id,
            title=title.strip(),
            start_date=as_date(start_date),
            workdays=int(workdays),
            exceptions=self._exception_repo.list_by_project(project_id),
            phase=phase,
            status=TaskStatus.PENDING,
            is_milestone=is_milestone,
            percent_complete=percent_complete,
            sort_order=next_order,
        )

        try:
            self._task_repo.add(task)
            self._session.commit()
            logger.info(f"Created task {task.id} - {task.title} for project {project_id}")
        except Exception as exc:
            self._session.rollback()
            logger.error(f"Error creating task: {exc}")
            raise

        self.recalculate_critical_path(project_id)
        domain_events.schedule_changed.emit(project_id)
        return self._require_task(task.id)

    def update_task(
        self,
        task_id: str,
        title: str | None = None,
        start_date: Optional[DateLike] = None,
        workdays: int | None = None,
        phase: str | None = None,
        is_milestone: bool | None = None,
        percent_complete: int | None = None,
    ) -> ScheduleTask:
        task = self._require_task(task_id)

        if title is not None:
            self._validate_task_title(title)
            task.title = title.strip()
        if start_date is not None:
            task.start_date = as_date(start_date)
        if workdays is not None:
            self._validate_workdays(workdays)
            task.workdays = int(workdays)
        if phase is not None:
            task.phase = phase
        if is_milestone is not None:
            task.is_milestone = is_milestone
        if percent_complete is not None:
            self._validate_percent_complete(percent_complete)
            task.percent_complete = percent_complete

        exceptions = self._exception_repo.list_by_project(task.project_id)
        task.end_date_calculated = WorkCalendarEngine(exceptions).add_workdays(
            task.start_date, task.workdays
        )

        tasks = [task if t.id == task_id else t for t in self._task_repo.list_by_project(task.project_id)]
        deps = self._project_dependencies(tasks)
        updates = propagate_dates(task_id, tasks, deps, exceptions)

        try:
            self._task_repo.update(task)
            self._apply_date_updates({t.id: t for t in tasks}, updates)
            self._refresh_critical_flags(tasks, deps)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            raise exc

        logger.info(f"Updated task {task.id}; {len(updates)} downstream task(s) moved")
        domain_events.schedule_changed.emit(task.project_id)
        return task

    def update_task_status(self, task_id: str, status: TaskStatus) -> ScheduleTask:
        task = self._require_task(task_id)
        task.status = TaskStatus(status)
        try:
            self._task_repo.update(task)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            raise exc
        domain_events.schedule_changed.emit(task.project_id)
        return task

    def delete_task(self, task_id: str) -> None:
        task = self._require_task(task_id)
        try:
            self._dependency_repo.delete_for_task(task_id)
            self._task_repo.delete(task_id)
            self._session.commit()
            logger.info(f"Deleted task {task_id} from project {task.project_id}")
        except Exception as exc:
            self._session.rollback()
            raise exc

        self.recalculate_critical_path(task.project_id)
        domain_events.schedule_changed.emit(task.project_id)

    def reorder_tasks(self, project_id: str, orders: Dict[str, int]) -> None:
        tasks = {t.id: t for t in self._task_repo.list_by_project(project_id)}
        try:
            for task_id, sort_order in orders.items():
                task = tasks.get(task_id)
                if task is None:
                    raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
                task.sort_order = int(sort_order)
                self._task_repo.update(task)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            raise exc
        domain_events.schedule_changed.emit(project_id)
