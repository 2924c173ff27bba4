from __future__ import annotations

import logging
from typing import Dict, Iterable

from core.domain import Task, TaskDependency
from core.services.critical_path.models import TaskNode

logger = logging.getLogger(__name__)


def task_duration_days(task: Task) -> int:
    """Inclusive calendar length of a task; never shorter than one day."""
    return max(1, (task.end_date - task.start_date).days + 1)


def build_task_nodes(
    tasks: Iterable[Task],
    deps: Iterable[TaskDependency],
) -> Dict[str, TaskNode]:
    nodes: Dict[str, TaskNode] = {
        task.id: TaskNode(task=task, duration=task_duration_days(task))
        for task in tasks
    }

    for dep in deps:
        predecessor = nodes.get(dep.predecessor_task_id)
        successor = nodes.get(dep.successor_task_id)
        if predecessor is None or successor is None:
            logger.warning(
                "Ignoring dependency %s: unknown task %s -> %s",
                dep.id,
                dep.predecessor_task_id,
                dep.successor_task_id,
            )
            continue
        predecessor.successors.append(dep.successor_task_id)
        successor.predecessors.append(dep.predecessor_task_id)

    return nodes


__all__ = ["task_duration_days", "build_task_nodes"]
