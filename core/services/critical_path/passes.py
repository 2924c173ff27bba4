from __future__ import annotations

from typing import Dict, List

from core.services.critical_path.models import TaskNode


def run_forward_pass(nodes: Dict[str, TaskNode], topo_order: List[str]) -> int:
    """
    Earliest start/finish per node; returns the project end offset.

    A task without binding predecessors keeps its planned calendar position
    (days after the earliest task start) instead of being pulled to day zero.
    """
    if not nodes:
        return 0

    project_start = min(node.task.start_date for node in nodes.values())
    project_end = 0

    for task_id in topo_order:
        node = nodes[task_id]
        earliest_start = (node.task.start_date - project_start).days
        for pred_id in node.predecessors:
            earliest_start = max(earliest_start, nodes[pred_id].earliest_finish)

        node.earliest_start = earliest_start
        node.earliest_finish = earliest_start + node.duration
        project_end = max(project_end, node.earliest_finish)

    return project_end


def run_backward_pass(
    nodes: Dict[str, TaskNode],
    topo_order: List[str],
    project_end: int,
) -> None:
    """Latest start/finish per node, anchored at the global project end."""
    for task_id in reversed(topo_order):
        node = nodes[task_id]
        if not node.successors:
            node.latest_finish = project_end
        else:
            node.latest_finish = min(nodes[succ_id].latest_start for succ_id in node.successors)

        node.latest_start = node.latest_finish - node.duration
        node.slack = node.latest_start - node.earliest_start


__all__ = ["run_forward_pass", "run_backward_pass"]
