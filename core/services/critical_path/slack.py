from __future__ import annotations

from typing import Dict

from core.exceptions import InconsistentScheduleError
from core.services.critical_path.models import CriticalPathResult, TaskNode, TaskSlackInfo


def _free_slack(node: TaskNode, nodes: Dict[str, TaskNode]) -> int:
    if not node.successors:
        return max(0, node.slack)
    return min(
        max(0, nodes[succ_id].earliest_start - node.earliest_finish)
        for succ_id in node.successors
    )


def compute_task_slack(nodes: Dict[str, TaskNode], project_end: int) -> CriticalPathResult:
    result = CriticalPathResult(project_end=project_end)

    for task_id, node in nodes.items():
        if node.slack < 0:
            raise InconsistentScheduleError(task_id, node.slack)

        is_critical = node.slack <= 0
        result.task_slack[task_id] = TaskSlackInfo(
            task_id=task_id,
            total_slack=max(0, node.slack),
            free_slack=_free_slack(node, nodes),
            earliest_start=node.earliest_start,
            latest_start=node.latest_start,
            is_critical=is_critical,
        )
        if is_critical:
            result.critical_task_ids.add(task_id)

    return result


__all__ = ["compute_task_slack"]
