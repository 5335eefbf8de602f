from __future__ import annotations

from datetime import date
from typing import Any, Dict

from core.models import (
    DependencyType,
    ScheduleBaseline,
    ScheduleTask,
    TaskDependency,
    TaskStatus,
    WorkdayException,
)
from infra.db.models import (
    ScheduleBaselineORM,
    ScheduleTaskORM,
    TaskDependencyORM,
    WorkdayExceptionORM,
)


def task_to_orm(task: ScheduleTask) -> ScheduleTaskORM:
    return ScheduleTaskORM(
        id=task.id,
        project_id=task.project_id,
        title=task.title,
        start_date=task.start_date,
        workdays=task.workdays,
        end_date_calculated=task.end_date_calculated,
        phase=task.phase,
        status=task.status,
        is_critical_path=task.is_critical_path,
        is_milestone=task.is_milestone,
        percent_complete=task.percent_complete,
        sort_order=task.sort_order,
    )


def task_from_orm(obj: ScheduleTaskORM) -> ScheduleTask:
    return ScheduleTask(
        id=obj.id,
        project_id=obj.project_id,
        title=obj.title,
        start_date=obj.start_date,
        workdays=obj.workdays,
        end_date_calculated=obj.end_date_calculated,
        phase=obj.phase or "",
        status=obj.status,
        is_critical_path=bool(obj.is_critical_path),
        is_milestone=bool(obj.is_milestone),
        percent_complete=obj.percent_complete or 0,
        sort_order=obj.sort_order or 0,
    )


def dependency_to_orm(dependency: TaskDependency) -> TaskDependencyORM:
    return TaskDependencyORM(
        id=dependency.id,
        predecessor_task_id=dependency.predecessor_task_id,
        successor_task_id=dependency.successor_task_id,
        dependency_type=dependency.dependency_type,
        lag_days=dependency.lag_days,
    )


def dependency_from_orm(obj: TaskDependencyORM) -> TaskDependency:
    return TaskDependency(
        id=obj.id,
        predecessor_task_id=obj.predecessor_task_id,
        successor_task_id=obj.successor_task_id,
        dependency_type=obj.dependency_type,
        lag_days=obj.lag_days,
    )


def exception_to_orm(exception: WorkdayException) -> WorkdayExceptionORM:
    return WorkdayExceptionORM(
        id=exception.id,
        project_id=exception.project_id,
        title=exception.title,
        start_date=exception.start_date,
        end_date=exception.end_date,
        type=exception.type,
        category=exception.category,
        recurrence=exception.recurrence,
        notes=exception.notes,
    )


def exception_from_orm(obj: WorkdayExceptionORM) -> WorkdayException:
    return WorkdayException(
        id=obj.id,
        project_id=obj.project_id,
        title=obj.title,
        start_date=obj.start_date,
        end_date=obj.end_date,
        type=obj.type,
        category=obj.category,
        recurrence=obj.recurrence,
        notes=obj.notes,
    )



# baseline snapshots are stored as one JSON document per row
def _task_to_json(task: ScheduleTask) -> Dict[str, Any]:
    return {
        "id": task.id,
        "project_id": task.project_id,
        "title": task.title,
        "start_date": task.start_date.isoformat(),
        "workdays": task.workdays,
        "end_date_calculated": task.end_date_calculated.isoformat(),
        "phase": task.phase,
        "status": task.status.value,
        "is_critical_path": task.is_critical_path,
        "is_milestone": task.is_milestone,
        "percent_complete": task.percent_complete,
        "sort_order": task.sort_order,
    }


def _task_from_json(data: Dict[str, Any]) -> ScheduleTask:
    return ScheduleTask(
        id=data["id"],
        project_id=data["project_id"],
        title=data["title"],
        start_date=date.fromisoformat(data["start_date"]),
        workdays=int(data["workdays"]),
        end_date_calculated=date.fromisoformat(data["end_date_calculated"]),
        phase=data.get("phase") or "",
        status=TaskStatus(data.get("status", TaskStatus.PENDING.value)),
        is_critical_path=bool(data.get("is_critical_path")),
        is_milestone=bool(data.get("is_milestone")),
        percent_complete=int(data.get("percent_complete") or 0),
        sort_order=int(data.get("sort_order") or 0),
    )


def _dependency_to_json(dependency: TaskDependency) -> Dict[str, Any]:
    return {
        "id": dependency.id,
        "predecessor_task_id": dependency.predecessor_task_id,
        "successor_task_id": dependency.successor_task_id,
        "dependency_type": dependency.dependency_type.value,
        "lag_days": dependency.lag_days,
    }


def _dependency_from_json(data: Dict[str, Any]) -> TaskDependency:
    return TaskDependency(
        id=data["id"],
        predecessor_task_id=data["predecessor_task_id"],
        successor_task_id=data["successor_task_id"],
        dependency_type=DependencyType(data.get("dependency_type", "FS")),
        lag_days=int(data.get("lag_days") or 0),
    )


def baseline_to_orm(baseline: ScheduleBaseline) -> ScheduleBaselineORM:
    return ScheduleBaselineORM(
        id=baseline.id,
        project_id=baseline.project_id,
        name=baseline.name,
        description=baseline.description,
        snapshot_data={
            "tasks": [_task_to_json(t) for t in baseline.tasks],
            "dependencies": [_dependency_to_json(d) for d in baseline.dependencies],
        },
        created_at=baseline.created_at,
    )


def baseline_from_orm(obj: ScheduleBaselineORM) -> ScheduleBaseline:
    snapshot = obj.snapshot_data or {}
    return ScheduleBaseline(
        id=obj.id,
        project_id=obj.project_id,
        name=obj.name,
        created_at=obj.created_at,
        tasks=[_task_from_json(t) for t in snapshot.get("tasks", [])],
        dependencies=[_dependency_from_json(d) for d in snapshot.get("dependencies", [])],
        description=obj.description,
    )


__all__ = [
    "task_to_orm",
    "task_from_orm",
    "dependency_to_orm",
    "dependency_from_orm",
    "exception_to_orm",
    "exception_from_orm",
    "baseline_to_orm",
    "baseline_from_orm",
]
