from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List

from core.interfaces import DependencyRepository, TaskRepository, WorkdayExceptionRepository
from core.models import ScheduleTask, TaskDependency, TaskStatus, WorkdayException


@dataclass
class ScheduleSnapshot:
    tasks: List[ScheduleTask] = field(default_factory=list)
    dependencies: List[TaskDependency] = field(default_factory=list)
    exceptions: List[WorkdayException] = field(default_factory=list)


@dataclass
class PhaseSummary:
    phase: str
    tasks: List[ScheduleTask]
    start_date: date
    end_date: date
    progress: int
    is_complete: bool


class TaskQueryMixin:
    _task_repo: TaskRepository
    _dependency_repo: DependencyRepository
    _exception_repo: WorkdayExceptionRepository

    def list_tasks_for_project(self, project_id: str) -> List[ScheduleTask]:
        tasks = self._task_repo.list_by_project(project_id)
        return sorted(tasks, key=lambda t: t.sort_order)

    def get_task(self, task_id: str) -> ScheduleTask:
        return self._require_task(task_id)

    def get_schedule(self, project_id: str) -> ScheduleSnapshot:
        tasks = self.list_tasks_for_project(project_id)
        return ScheduleSnapshot(
            tasks=tasks,
            dependencies=self._project_dependencies(tasks),
            exceptions=self._exception_repo.list_by_project(project_id),
        )

    def summarize_phases(self, project_id: str) -> List[PhaseSummary]:
        by_phase: dict[str, List[ScheduleTask]] = {}
        for task in self.list_tasks_for_project(project_id):
            by_phase.setdefault(task.phase or "uncategorized", []).append(task)

        summaries: List[PhaseSummary] = []
        for phase, tasks in by_phase.items():
            progress = round(sum(t.percent_complete for t in tasks) / len(tasks))
            summaries.append(
                PhaseSummary(
                    phase=phase,
                    tasks=tasks,
                    start_date=min(t.start_date for t in tasks),
                    end_date=max(t.end_date_calculated for t in tasks),
                    progress=progress,
                    is_complete=all(t.status == TaskStatus.COMPLETE for t in tasks),
                )
            )
        return summaries
