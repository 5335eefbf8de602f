from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from core.domain.calendar import WorkdayException
from core.domain.enums import DependencyType, TaskStatus
from core.domain.identifiers import generate_id
from core.exceptions import ValidationError


@dataclass
class ScheduleTask:
    id: str
    project_id: str
    title: str
    start_date: date
    workdays: int
    end_date_calculated: date
    phase: str = ""
    status: TaskStatus = TaskStatus.PENDING
    is_critical_path: bool = False
    is_milestone: bool = False
    percent_complete: int = 0
    sort_order: int = 0

    @staticmethod
    def create(
        project_id: str,
        title: str,
        start_date: date,
        workdays: int,
        exceptions: Iterable[WorkdayException] = (),
        **extra,
    ) -> "ScheduleTask":
        # imported here: the calendar engine depends on the domain package
        from core.services.work_calendar.engine import WorkCalendarEngine

        end = WorkCalendarEngine(exceptions).add_workdays(start_date, workdays)
        return ScheduleTask(
            id=generate_id(),
            project_id=project_id,
            title=title,
            start_date=start_date,
            workdays=workdays,
            end_date_calculated=end,
            **extra,
        )


@dataclass
class TaskDependency:
    id: str
    predecessor_task_id: str
    successor_task_id: str
    dependency_type: DependencyType = DependencyType.FINISH_TO_START
    lag_days: int = 0

    @staticmethod
    def create(
        predecessor_id: str,
        successor_id: str,
        dependency_type: DependencyType = DependencyType.FINISH_TO_START,
        lag_days: int = 0,
    ) -> "TaskDependency":
        if predecessor_id == successor_id:
            raise ValidationError("A task cannot depend on itself.", code="SELF_DEPENDENCY")
        return TaskDependency(
            id=generate_id(),
            predecessor_task_id=predecessor_id,
            successor_task_id=successor_id,
            dependency_type=dependency_type,
            lag_days=lag_days,
        )

    @property
    def is_finish_to_start(self) -> bool:
        return self.dependency_type == DependencyType.FINISH_TO_START


__all__ = ["ScheduleTask", "TaskDependency"]
