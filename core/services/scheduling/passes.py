from __future__ import annotations

from typing import Dict, List

from core.services.scheduling.models import CPMNode


def run_forward_pass(
    nodes: Dict[str, CPMNode],
    topo_order: List[str],
    predecessors: Dict[str, List[str]],
) -> int:
    """Fill early start/finish in topological order and return the project finish."""
    for task_id in topo_order:
        node = nodes[task_id]
        preds = predecessors[task_id]
        if preds:
            node.early_start = max(nodes[p].early_finish for p in preds)
        else:
            node.early_start = 0
        node.early_finish = node.early_start + node.duration

    return max(node.early_finish for node in nodes.values())


def run_backward_pass(
    nodes: Dict[str, CPMNode],
    topo_order: List[str],
    successors: Dict[str, List[str]],
    project_finish: int,
) -> None:
    for task_id in reversed(topo_order):
        node = nodes[task_id]
        succs = successors[task_id]
        if succs:
            node.late_finish = min(nodes[s].late_start for s in succs)
        else:
            node.late_finish = project_finish
        node.late_start = node.late_finish - node.duration
        node.total_float = node.late_start - node.early_start


__all__ = ["run_forward_pass", "run_backward_pass"]
