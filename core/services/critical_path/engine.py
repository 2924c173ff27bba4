from __future__ import annotations

import logging
from typing import Iterable, List, Set

from core.domain import Task, TaskDependency
from core.services.critical_path.fallback import trace_fallback_path
from core.services.critical_path.graph import build_task_nodes
from core.services.critical_path.models import CriticalPathResult, CriticalPathStats
from core.services.critical_path.passes import run_backward_pass, run_forward_pass
from core.services.critical_path.sequencing import topological_order
from core.services.critical_path.slack import compute_task_slack

logger = logging.getLogger(__name__)


class CriticalPathEngine:
    """
    CPM engine over calendar-dated tasks:
    - Graph build: durations and predecessor/successor lists
    - Topological order (cycles rejected)
    - Forward pass: ES/EF, project end
    - Backward pass: LS/LF against the global project end
    - Total/free slack, critical flag, fallback chain when nothing is critical

    Holds no state between calls; every call recomputes from scratch.
    """

    def calculate(
        self,
        tasks: Iterable[Task],
        dependencies: Iterable[TaskDependency],
    ) -> CriticalPathResult:
        tasks = list(tasks)
        if not tasks:
            return CriticalPathResult()

        nodes = build_task_nodes(tasks, dependencies)
        topo_order = topological_order(nodes)

        project_end = run_forward_pass(nodes, topo_order)
        run_backward_pass(nodes, topo_order, project_end)

        result = compute_task_slack(nodes, project_end)
        if not result.critical_task_ids:
            logger.debug("No zero-slack task found; tracing fallback chain")
            trace_fallback_path(nodes, topo_order, result)

        logger.debug(
            "Critical path computed: %d tasks, %d critical, project end day %d",
            len(nodes),
            len(result.critical_task_ids),
            project_end,
        )
        return result


def calculate_critical_path_with_slack(
    tasks: Iterable[Task],
    dependencies: Iterable[TaskDependency],
) -> CriticalPathResult:
    return CriticalPathEngine().calculate(tasks, dependencies)


def calculate_critical_path(
    tasks: Iterable[Task],
    dependencies: Iterable[TaskDependency],
) -> Set[str]:
    """Critical task ids only."""
    return calculate_critical_path_with_slack(tasks, dependencies).critical_task_ids


def _calendar_span_days(tasks: List[Task]) -> int:
    if not tasks:
        return 0
    start = min(task.start_date for task in tasks)
    end = max(task.end_date for task in tasks)
    return (end - start).days + 1


def get_critical_path_stats(
    tasks: Iterable[Task],
    critical_task_ids: Set[str],
) -> CriticalPathStats:
    tasks = list(tasks)
    critical_tasks = [task for task in tasks if task.id in critical_task_ids]
    return CriticalPathStats(
        total_tasks=len(tasks),
        critical_tasks=len(critical_task_ids),
        project_duration=_calendar_span_days(tasks),
        critical_path_duration=_calendar_span_days(critical_tasks),
    )


__all__ = [
    "CriticalPathEngine",
    "calculate_critical_path_with_slack",
    "calculate_critical_path",
    "get_critical_path_stats",
]
