from __future__ import annotations

import logging
from collections import deque
from dataclasses import replace
from typing import Dict, Iterable, List, Sequence

from core.models import ScheduleTask, TaskDependency, WorkdayException
from core.services.scheduling.models import DateUpdate
from core.services.work_calendar.engine import WorkCalendarEngine

logger = logging.getLogger(__name__)


def propagate_dates(
    changed_task_id: str,
    tasks: Sequence[ScheduleTask],
    deps: Iterable[TaskDependency],
    exceptions: Iterable[WorkdayException] = (),
) -> Dict[str, DateUpdate]:
    """
    Push a task's new dates down its FS successors.

    Breadth-first from ``changed_task_id``: each successor starts ``1 + lag``
    working days after its predecessor's end and keeps its workday count.
    Only successors whose dates actually move are recorded and walked
    further. Caller-owned tasks are never mutated.
    """
    calendar = WorkCalendarEngine(exceptions)
    working: Dict[str, ScheduleTask] = {t.id: replace(t) for t in tasks}

    successor_deps: Dict[str, List[TaskDependency]] = {}
    for dep in deps:
        if dep.is_finish_to_start:
            successor_deps.setdefault(dep.predecessor_task_id, []).append(dep)

    updates: Dict[str, DateUpdate] = {}
    queue = deque([changed_task_id])
    visited: set[str] = set()

    while queue:
        current_id = queue.popleft()
        if current_id in visited:
            continue
        visited.add(current_id)

        current = working.get(current_id)
        if current is None:
            continue

        for dep in successor_deps.get(current_id, []):
            successor = working.get(dep.successor_task_id)
            if successor is None:
                continue

            new_start = calendar.shift_workdays(current.end_date_calculated, 1 + dep.lag_days)
            new_end = calendar.add_workdays(new_start, successor.workdays)
            if new_start == successor.start_date and new_end == successor.end_date_calculated:
                continue

            successor.start_date = new_start
            successor.end_date_calculated = new_end
            updates[successor.id] = DateUpdate(start_date=new_start, end_date_calculated=new_end)
            queue.append(successor.id)

    if updates:
        logger.debug("Propagation from %s moved %d task(s)", changed_task_id, len(updates))
    return updates


__all__ = ["propagate_dates"]
