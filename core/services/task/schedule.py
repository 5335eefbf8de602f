from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List

from sqlalchemy.orm import Session

from core.interfaces import DependencyRepository, TaskRepository, WorkdayExceptionRepository
from core.models import ScheduleTask, TaskDependency, WorkdayException
from core.services.scheduling import DateUpdate, find_critical_path, propagate_dates
from core.services.scheduling.graph import build_fs_adjacency, topological_order
from core.services.work_calendar.engine import WorkCalendarEngine

logger = logging.getLogger(__name__)


class TaskScheduleMixin:
    """Derived-state upkeep: propagated dates and critical path flags."""

    _session: Session
    _task_repo: TaskRepository
    _dependency_repo: DependencyRepository
    _exception_repo: WorkdayExceptionRepository

    def _project_dependencies(self, tasks: List[ScheduleTask]) -> List[TaskDependency]:
        if not tasks:
            return []
        task_ids = {t.id for t in tasks}
        deps = self._dependency_repo.list_by_project(tasks[0].project_id)
        return [
            d
            for d in deps
            if d.predecessor_task_id in task_ids and d.successor_task_id in task_ids
        ]

    def _apply_date_updates(
        self,
        tasks_by_id: Dict[str, ScheduleTask],
        updates: Dict[str, DateUpdate],
    ) -> None:
        for task_id, upd in updates.items():
            task = tasks_by_id[task_id]
            task.start_date = upd.start_date
            task.end_date_calculated = upd.end_date_calculated
            self._task_repo.update(task)

    def _refresh_critical_flags(
        self,
        tasks: List[ScheduleTask],
        deps: List[TaskDependency],
    ) -> set[str]:
        critical = find_critical_path(tasks, deps)
        for task in tasks:
            is_critical = task.id in critical
            if task.is_critical_path != is_critical:
                task.is_critical_path = is_critical
                self._task_repo.update(task)
        return critical

    def recalculate_critical_path(self, project_id: str) -> set[str]:
        tasks = self._task_repo.list_by_project(project_id)
        deps = self._project_dependencies(tasks)
        try:
            critical = self._refresh_critical_flags(tasks, deps)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            raise exc
        logger.info(f"Critical path for project {project_id}: {len(critical)} task(s)")
        return critical

    def reschedule_project(self, project_id: str) -> Dict[str, DateUpdate]:
        """
        Re-derive every end date against the current exception set, then
        re-seat every FS successor.

        Successors are re-seated even when their predecessor's end did not
        move, because a new exception can still land on the day after it.
        """
        exceptions: List[WorkdayException] = self._exception_repo.list_by_project(project_id)
        calendar = WorkCalendarEngine(exceptions)
        tasks = self._task_repo.list_by_project(project_id)
        deps = self._project_dependencies(tasks)
        tasks_by_id = {t.id: t for t in tasks}
        original = {t.id: (t.start_date, t.end_date_calculated) for t in tasks}

        for task in tasks:
            task.end_date_calculated = calendar.add_workdays(task.start_date, task.workdays)

        # upstream first so each task is seated from settled predecessors
        successors, _ = build_fs_adjacency(tasks_by_id.keys(), deps)
        order = topological_order(successors) or list(tasks_by_id)
        for task_id in order:
            if not successors.get(task_id):
                continue
            snapshot = [replace(t) for t in tasks_by_id.values()]
            updates = propagate_dates(task_id, snapshot, deps, exceptions)
            for succ_id, upd in updates.items():
                task = tasks_by_id[succ_id]
                task.start_date = upd.start_date
                task.end_date_calculated = upd.end_date_calculated

        changes: Dict[str, DateUpdate] = {
            t.id: DateUpdate(t.start_date, t.end_date_calculated)
            for t in tasks
            if (t.start_date, t.end_date_calculated) != original[t.id]
        }

        try:
            for task_id in changes:
                self._task_repo.update(tasks_by_id[task_id])
            self._refresh_critical_flags(tasks, deps)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            raise exc

        if changes:
            logger.info(f"Rescheduled {len(changes)} task(s) in project {project_id}")
        return changes
