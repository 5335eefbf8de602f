from __future__ import annotations

from core.exceptions import ValidationError


class TaskValidationMixin:
    def _validate_task_title(self, title: str) -> None:
        if not title or not title.strip():
            raise ValidationError("Task title cannot be empty.", code="TASK_TITLE_EMPTY")

    def _validate_workdays(self, workdays: int) -> None:
        if workdays is None or int(workdays) < 0:
            raise ValidationError(
                "Task workdays cannot be negative.", code="TASK_INVALID_WORKDAYS"
            )

    def _validate_percent_complete(self, percent_complete: int) -> None:
        if percent_complete < 0 or percent_complete > 100:
            raise ValidationError(
                "percent_complete must be between 0 and 100.", code="TASK_INVALID_PROGRESS"
            )

    def _validate_not_self_dependency(self, predecessor_id: str, successor_id: str) -> None:
        if predecessor_id == successor_id:
            raise ValidationError("A task cannot depend on itself.", code="SELF_DEPENDENCY")
