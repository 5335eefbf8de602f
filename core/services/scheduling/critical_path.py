from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Sequence

from core.models import ScheduleTask, TaskDependency
from core.services.scheduling.graph import build_fs_adjacency, topological_order
from core.services.scheduling.models import CPMNode
from core.services.scheduling.passes import run_backward_pass, run_forward_pass

logger = logging.getLogger(__name__)


def compute_cpm(
    tasks: Sequence[ScheduleTask],
    deps: Iterable[TaskDependency],
) -> Optional[Dict[str, CPMNode]]:
    """
    Classic CPM over FS dependencies, durations in workdays.

    Returns None when the FS subgraph contains a cycle; SS/FF/SF edges and
    edges pointing at unknown tasks are ignored.
    """
    nodes: Dict[str, CPMNode] = {
        task.id: CPMNode(id=task.id, duration=int(task.workdays or 0)) for task in tasks
    }
    if not nodes:
        return {}

    successors, predecessors = build_fs_adjacency(nodes.keys(), deps)
    topo_order = topological_order(successors)
    if topo_order is None:
        logger.warning(
            "Circular FS dependency among %d tasks; critical path not computed.", len(nodes)
        )
        return None

    project_finish = run_forward_pass(nodes, topo_order, predecessors)
    run_backward_pass(nodes, topo_order, successors, project_finish)
    return nodes


def find_critical_path(
    tasks: Sequence[ScheduleTask],
    deps: Iterable[TaskDependency],
) -> set[str]:
    """IDs of every zero-float task. Empty for no tasks or a cyclic graph."""
    nodes = compute_cpm(tasks, deps)
    if not nodes:
        return set()
    return {task_id for task_id, node in nodes.items() if node.is_critical}


__all__ = ["compute_cpm", "find_critical_path"]
