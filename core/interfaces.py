# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.models import ScheduleBaseline, ScheduleTask, TaskDependency, WorkdayException


class TaskRepository(ABC):
    @abstractmethod
    def add(self, task: ScheduleTask) -> None: ...

    @abstractmethod
    def update(self, task: ScheduleTask) -> None: ...

    @abstractmethod
    def delete(self, task_id: str) -> None: ...

    @abstractmethod
    def get(self, task_id: str) -> Optional[ScheduleTask]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[ScheduleTask]: ...


class DependencyRepository(ABC):
    @abstractmethod
    def add(self, dependency: TaskDependency) -> None: ...

    @abstractmethod
    def get(self, dependency_id: str) -> Optional[TaskDependency]: ...

    @abstractmethod
    def delete(self, dependency_id: str) -> None: ...

    @abstractmethod
    def delete_for_task(self, task_id: str) -> None: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[TaskDependency]: ...


class WorkdayExceptionRepository(ABC):
    @abstractmethod
    def add(self, exception: WorkdayException) -> None: ...

    @abstractmethod
    def update(self, exception: WorkdayException) -> None: ...

    @abstractmethod
    def delete(self, exception_id: str) -> None: ...

    @abstractmethod
    def get(self, exception_id: str) -> Optional[WorkdayException]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[WorkdayException]: ...


class BaselineRepository(ABC):
    @abstractmethod
    def add(self, baseline: ScheduleBaseline) -> None: ...

    @abstractmethod
    def get(self, baseline_id: str) -> Optional[ScheduleBaseline]: ...

    @abstractmethod
    def delete(self, baseline_id: str) -> None: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[ScheduleBaseline]: ...


__all__ = [
    "TaskRepository",
    "DependencyRepository",
    "WorkdayExceptionRepository",
    "BaselineRepository",
]
