from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Iterable, List, Optional

from core.domain.identifiers import generate_id
from core.domain.task import ScheduleTask, TaskDependency


@dataclass
class ScheduleBaseline:
    """
    A named, frozen copy of a project's tasks and in-project dependencies,
    kept for planned-versus-actual comparison. Later schedule edits never
    reach the copied rows.
    """

    id: str
    project_id: str
    name: str
    created_at: datetime
    tasks: List[ScheduleTask] = field(default_factory=list)
    dependencies: List[TaskDependency] = field(default_factory=list)
    description: Optional[str] = None

    @staticmethod
    def create(
        project_id: str,
        name: str,
        tasks: Iterable[ScheduleTask],
        dependencies: Iterable[TaskDependency],
        description: Optional[str] = None,
    ) -> "ScheduleBaseline":
        return ScheduleBaseline(
            id=generate_id(),
            project_id=project_id,
            name=name,
            created_at=datetime.now(),
            tasks=[replace(t) for t in tasks],
            dependencies=[replace(d) for d in dependencies],
            description=description,
        )

    def task_by_id(self, task_id: str) -> Optional[ScheduleTask]:
        return next((t for t in self.tasks if t.id == task_id), None)


__all__ = ["ScheduleBaseline"]
