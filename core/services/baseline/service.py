# core/services/baseline/service.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import BaselineRepository
from core.models import ScheduleBaseline
from core.services.task import TaskService

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


class BaselineService:
    def __init__(
        self,
        session: Session,
        baseline_repo: BaselineRepository,
        task_service: TaskService,
    ):
        self._session: Session = session
        self._baselines: BaselineRepository = baseline_repo
        self._tasks: TaskService = task_service

    def create_baseline(
        self,
        project_id: str,
        name: str,
        description: Optional[str] = None,
    ) -> ScheduleBaseline:
        """
        Snapshot the project's current tasks (in sort order) and the
        dependencies whose endpoints both belong to the project.
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Baseline name cannot be empty.", code="BASELINE_NAME_EMPTY")
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Baseline name must be {MAX_NAME_LENGTH} characters or less.",
                code="BASELINE_NAME_TOO_LONG",
            )
        if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description must be {MAX_DESCRIPTION_LENGTH} characters or less.",
                code="BASELINE_DESCRIPTION_TOO_LONG",
            )

        schedule = self._tasks.get_schedule(project_id)
        baseline = ScheduleBaseline.create(
            project_id=project_id,
            name=name,
            tasks=schedule.tasks,
            dependencies=schedule.dependencies,
            description=description,
        )

        try:
            self._baselines.add(baseline)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        logger.info(
            f"Created baseline {baseline.id} '{name}' for project {project_id} "
            f"({len(baseline.tasks)} tasks, {len(baseline.dependencies)} dependencies)"
        )
        domain_events.baselines_changed.emit(project_id)
        return baseline

    def list_baselines(self, project_id: str) -> List[ScheduleBaseline]:
        return self._baselines.list_by_project(project_id)

    def get_baseline(self, baseline_id: str) -> ScheduleBaseline:
        baseline = self._baselines.get(baseline_id)
        if not baseline:
            raise NotFoundError("Baseline not found.", code="BASELINE_NOT_FOUND")
        return baseline

    def delete_baseline(self, baseline_id: str) -> None:
        baseline = self.get_baseline(baseline_id)
        try:
            self._baselines.delete(baseline_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        logger.info(f"Deleted baseline {baseline_id} from project {baseline.project_id}")
        domain_events.baselines_changed.emit(baseline.project_id)
