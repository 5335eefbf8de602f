# infra/db/models.py
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    String,
    Date,
    DateTime,
    JSON,
    Boolean,
    ForeignKey,
    Enum as SAEnum,
    Index,
    Integer,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import (
    TaskStatus,
    DependencyType,
    ExceptionType,
    ExceptionCategory,
    ExceptionRecurrence,
)


class ScheduleTaskORM(Base):
    __tablename__ = "schedule_tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(String, nullable=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    workdays: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    end_date_calculated: Mapped[date] = mapped_column(Date, nullable=False)
    phase: Mapped[str] = mapped_column(String, default="")
    status: Mapped[TaskStatus] = mapped_column(
        SAEnum(TaskStatus), default=TaskStatus.PENDING, nullable=False
    )
    is_critical_path: Mapped[bool] = mapped_column(Boolean, default=False)
    is_milestone: Mapped[bool] = mapped_column(Boolean, default=False)
    percent_complete: Mapped[int] = mapped_column(Integer, default=0)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)
Index("idx_schedule_tasks_project_id", ScheduleTaskORM.project_id)


class TaskDependencyORM(Base):
    __tablename__ = "task_dependencies"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    predecessor_task_id: Mapped[str] = mapped_column(String, ForeignKey("schedule_tasks.id",ondelete="CASCADE"), nullable=False)
    successor_task_id: Mapped[str] = mapped_column(String, ForeignKey("schedule_tasks.id",ondelete="CASCADE"), nullable=False)
    dependency_type: Mapped[DependencyType] = mapped_column(
        SAEnum(DependencyType), default=DependencyType.FINISH_TO_START, nullable=False
    )
    lag_days: Mapped[int] = mapped_column(nullable=False, default=0)
Index("idx_dep_predecessor", TaskDependencyORM.predecessor_task_id)
Index("idx_dep_successor", TaskDependencyORM.successor_task_id)


def _enum_values(enum_cls):
    # persist the lowercase wire values ("company_holiday"), not member names
    return [member.value for member in enum_cls]


class WorkdayExceptionORM(Base):
    __tablename__ = "workday_exceptions"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(String, nullable=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[ExceptionType] = mapped_column(
        SAEnum(ExceptionType, values_callable=_enum_values), default=ExceptionType.NON_WORKING, nullable=False
    )
    category: Mapped[ExceptionCategory] = mapped_column(
        SAEnum(ExceptionCategory, values_callable=_enum_values), default=ExceptionCategory.COMPANY_HOLIDAY, nullable=False
    )
    recurrence: Mapped[ExceptionRecurrence] = mapped_column(
        SAEnum(ExceptionRecurrence, values_callable=_enum_values), default=ExceptionRecurrence.ONE_TIME, nullable=False
    )
    notes: Mapped[Optional[str]] = mapped_column(String, nullable=True)
Index("idx_exceptions_project_range", WorkdayExceptionORM.project_id, WorkdayExceptionORM.start_date)


class ScheduleBaselineORM(Base):
    __tablename__ = "schedule_baselines"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    # {"tasks": [...], "dependencies": [...]} with ISO dates and enum values
    snapshot_data: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
Index("idx_baseline_project", ScheduleBaselineORM.project_id)
Index("idx_baseline_created", ScheduleBaselineORM.created_at)
