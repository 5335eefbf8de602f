from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Iterable, List, Optional

from core.models import TaskDependency

logger = logging.getLogger(__name__)


def would_create_cycle(
    existing_deps: Iterable[TaskDependency],
    predecessor_id: str,
    successor_id: str,
) -> bool:
    """
    True when adding ``predecessor_id -> successor_id`` would close a cycle.

    Depth-first search from the proposed successor over the existing edges
    plus the proposed one; reaching the proposed predecessor means a cycle.
    All dependency types count, not only FS.
    """
    if predecessor_id == successor_id:
        return True

    graph: Dict[str, set[str]] = {}
    for dep in existing_deps:
        graph.setdefault(dep.predecessor_task_id, set()).add(dep.successor_task_id)
    graph.setdefault(predecessor_id, set()).add(successor_id)

    target = predecessor_id
    stack = [successor_id]
    visited: set[str] = set()

    while stack:
        cur = stack.pop()
        if cur == target:
            return True
        if cur in visited:
            continue
        visited.add(cur)
        for nxt in graph.get(cur, ()):
            if nxt not in visited:
                stack.append(nxt)
    return False


def build_fs_adjacency(
    task_ids: Iterable[str],
    deps: Iterable[TaskDependency],
) -> tuple[dict[str, list[str]], dict[str, list[str]]]:
    """
    Successor/predecessor lists restricted to FS edges whose endpoints are
    both known. Dangling edges are dropped silently.
    """
    successors: Dict[str, List[str]] = {task_id: [] for task_id in task_ids}
    predecessors: Dict[str, List[str]] = {task_id: [] for task_id in successors}

    for dep in deps:
        if not dep.is_finish_to_start:
            continue
        pred_id, succ_id = dep.predecessor_task_id, dep.successor_task_id
        if pred_id not in successors or succ_id not in successors:
            logger.debug("Ignoring dangling dependency %s (%s -> %s)", dep.id, pred_id, succ_id)
            continue
        successors[pred_id].append(succ_id)
        predecessors[succ_id].append(pred_id)

    return successors, predecessors


def topological_order(successors: Dict[str, List[str]]) -> Optional[list[str]]:
    """Kahn's algorithm. Returns None when the graph holds a cycle."""
    indegree: Dict[str, int] = {task_id: 0 for task_id in successors}
    for targets in successors.values():
        for succ_id in targets:
            indegree[succ_id] += 1

    queue = deque(task_id for task_id, degree in indegree.items() if degree == 0)
    order: list[str] = []
    while queue:
        task_id = queue.popleft()
        order.append(task_id)
        for succ_id in successors[task_id]:
            indegree[succ_id] -= 1
            if indegree[succ_id] == 0:
                queue.append(succ_id)

    if len(order) != len(indegree):
        return None
    return order


__all__ = ["would_create_cycle", "build_fs_adjacency", "topological_order"]
