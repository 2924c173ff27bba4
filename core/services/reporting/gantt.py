from __future__ import annotations

from datetime import timedelta
from typing import Iterable, List

from core.domain import Task
from core.services.critical_path import CriticalPathResult
from core.services.critical_path.graph import task_duration_days
from core.services.reporting.models import GanttTaskBar


def build_gantt_bars(tasks: Iterable[Task], result: CriticalPathResult) -> List[GanttTaskBar]:
    tasks = list(tasks)
    if not tasks:
        return []

    # slack offsets count days from the earliest planned start
    project_start = min(task.start_date for task in tasks)

    bars: List[GanttTaskBar] = []
    for task in tasks:
        slack = result.task_slack.get(task.id)
        if slack is not None:
            earliest_start = project_start + timedelta(days=slack.earliest_start)
        else:
            earliest_start = task.start_date
        bars.append(
            GanttTaskBar(
                task_id=task.id,
                name=task.name,
                start=task.start_date,
                end=task.end_date,
                owner=task.owner,
                status=task.status,
                progress=task.progress,
                is_critical=task.id in result.critical_task_ids,
                total_slack=slack.total_slack if slack else 0,
                free_slack=slack.free_slack if slack else 0,
                earliest_start=earliest_start,
                slack_start=earliest_start + timedelta(days=task_duration_days(task)),
            )
        )

    bars.sort(key=lambda b: (b.start, b.name.lower()))
    return bars


__all__ = ["build_gantt_bars"]
