from __future__ import annotations

from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from core.interfaces import (
    BaselineRepository,
    DependencyRepository,
    TaskRepository,
    WorkdayExceptionRepository,
)
from core.models import ScheduleBaseline, ScheduleTask, TaskDependency, WorkdayException
from infra.db.mappers import (
    baseline_from_orm,
    baseline_to_orm,
    dependency_from_orm,
    dependency_to_orm,
    exception_from_orm,
    exception_to_orm,
    task_from_orm,
    task_to_orm,
)
from infra.db.models import (
    ScheduleBaselineORM,
    ScheduleTaskORM,
    TaskDependencyORM,
    WorkdayExceptionORM,
)


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, task: ScheduleTask) -> None:
        self.session.add(task_to_orm(task))

    def update(self, task: ScheduleTask) -> None:
        self.session.merge(task_to_orm(task))

    def delete(self, task_id: str) -> None:
        self.session.query(ScheduleTaskORM).filter_by(id=task_id).delete()

    def get(self, task_id: str) -> Optional[ScheduleTask]:
        obj = self.session.get(ScheduleTaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[ScheduleTask]:
        stmt = (
            select(ScheduleTaskORM)
            .where(ScheduleTaskORM.project_id == project_id)
            .order_by(ScheduleTaskORM.sort_order)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]


class SqlAlchemyDependencyRepository(DependencyRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, dependency: TaskDependency) -> None:
        self.session.add(dependency_to_orm(dependency))

    def get(self, dependency_id: str) -> Optional[TaskDependency]:
        obj = self.session.get(TaskDependencyORM, dependency_id)
        return dependency_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[TaskDependency]:
        task_ids_subq = select(ScheduleTaskORM.id).where(ScheduleTaskORM.project_id == project_id)
        stmt = select(TaskDependencyORM).where(
            TaskDependencyORM.predecessor_task_id.in_(task_ids_subq),
            TaskDependencyORM.successor_task_id.in_(task_ids_subq),
        )
        rows = self.session.execute(stmt).scalars().all()
        return [dependency_from_orm(row) for row in rows]

    def delete(self, dependency_id: str) -> None:
        self.session.query(TaskDependencyORM).filter_by(id=dependency_id).delete()

    def delete_for_task(self, task_id: str) -> None:
        self.session.query(TaskDependencyORM).filter(
            or_(
                TaskDependencyORM.predecessor_task_id == task_id,
                TaskDependencyORM.successor_task_id == task_id,
            )
        ).delete(synchronize_session=False)


class SqlAlchemyWorkdayExceptionRepository(WorkdayExceptionRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, exception: WorkdayException) -> None:
        self.session.add(exception_to_orm(exception))

    def update(self, exception: WorkdayException) -> None:
        self.session.merge(exception_to_orm(exception))

    def delete(self, exception_id: str) -> None:
        self.session.query(WorkdayExceptionORM).filter_by(id=exception_id).delete()

    def get(self, exception_id: str) -> Optional[WorkdayException]:
        obj = self.session.get(WorkdayExceptionORM, exception_id)
        return exception_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[WorkdayException]:
        stmt = select(WorkdayExceptionORM).where(WorkdayExceptionORM.project_id == project_id)
        rows = self.session.execute(stmt).scalars().all()
        return [exception_from_orm(row) for row in rows]


class SqlAlchemyBaselineRepository(BaselineRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, baseline: ScheduleBaseline) -> None:
        self.session.add(baseline_to_orm(baseline))

    def get(self, baseline_id: str) -> Optional[ScheduleBaseline]:
        obj = self.session.get(ScheduleBaselineORM, baseline_id)
        return baseline_from_orm(obj) if obj else None

    def delete(self, baseline_id: str) -> None:
        self.session.query(ScheduleBaselineORM).filter_by(id=baseline_id).delete()

    def list_by_project(self, project_id: str) -> List[ScheduleBaseline]:
        stmt = (
            select(ScheduleBaselineORM)
            .where(ScheduleBaselineORM.project_id == project_id)
            .order_by(ScheduleBaselineORM.created_at.desc())
        )
        rows = self.session.execute(stmt).scalars().all()
        return [baseline_from_orm(row) for row in rows]
