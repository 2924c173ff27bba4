from __future__ import annotations

import logging
from typing import Dict, Iterator, List

from core.exceptions import CyclicDependencyError
from core.services.critical_path.models import TaskNode

logger = logging.getLogger(__name__)

UNVISITED = 0
IN_PROGRESS = 1
DONE = 2


def topological_order(nodes: Dict[str, TaskNode]) -> List[str]:
    """
    Order task ids so that every predecessor comes before its successors.

    Seeds are visited by calendar start date (input order on ties), so
    disconnected components come out in the order they appear on the chart.
    Each seed is expanded with an explicit stack in post-order over its
    predecessors; meeting a node that is still on the stack means a cycle.
    """
    seeds = sorted(nodes, key=lambda task_id: nodes[task_id].task.start_date)
    state: Dict[str, int] = {task_id: UNVISITED for task_id in nodes}
    order: List[str] = []

    for seed in seeds:
        if state[seed] != UNVISITED:
            continue

        state[seed] = IN_PROGRESS
        stack: List[tuple[str, Iterator[str]]] = [(seed, iter(nodes[seed].predecessors))]

        while stack:
            task_id, pending = stack[-1]
            pred_id = next(pending, None)

            if pred_id is None:
                stack.pop()
                state[task_id] = DONE
                order.append(task_id)
                continue

            pred_state = state[pred_id]
            if pred_state == DONE:
                continue
            if pred_state == IN_PROGRESS:
                path = [entry_id for entry_id, _ in stack]
                cycle = [pred_id, *reversed(path[path.index(pred_id):])]
                logger.error("Cyclic dependency detected: %s", " -> ".join(cycle))
                raise CyclicDependencyError(pred_id, task_id, cycle)

            state[pred_id] = IN_PROGRESS
            stack.append((pred_id, iter(nodes[pred_id].predecessors)))

    return order


__all__ = ["topological_order"]
