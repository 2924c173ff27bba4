from __future__ import annotations

from typing import Dict, List, Optional

from core.services.critical_path.models import CriticalPathResult, TaskNode


def _latest_finishing(candidates: List[TaskNode]) -> Optional[TaskNode]:
    best: Optional[TaskNode] = None
    for node in candidates:
        if best is None or node.earliest_finish > best.earliest_finish:
            best = node
    return best


def trace_fallback_path(
    nodes: Dict[str, TaskNode],
    topo_order: List[str],
    result: CriticalPathResult,
) -> None:
    """
    Mark the longest-finishing chain critical when nothing has zero slack.

    Starts at the sink with the latest earliest finish and walks back through
    the predecessor that finishes last until a task without predecessors.
    """
    if result.critical_task_ids:
        return

    sinks = [nodes[task_id] for task_id in topo_order if not nodes[task_id].successors]
    current = _latest_finishing(sinks)

    while current is not None:
        if current.task_id in result.critical_task_ids:
            break
        result.critical_task_ids.add(current.task_id)
        slack_info = result.task_slack.get(current.task_id)
        if slack_info is not None:
            slack_info.is_critical = True
        current = _latest_finishing([nodes[pred_id] for pred_id in current.predecessors])


__all__ = ["trace_fallback_path"]
