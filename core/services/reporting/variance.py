from __future__ import annotations

from typing import Dict, Iterable

from core.domain import BaselineTask, Task, VarianceStatus
from core.services.reporting.models import TaskVariance


def calculate_schedule_variance(
    tasks: Iterable[Task],
    baseline_tasks: Iterable[BaselineTask],
) -> Dict[str, TaskVariance]:
    """
    Compares current task dates against the baseline snapshot.

    Tasks added after the baseline was taken report zero variance and
    has_baseline=False. The overall status follows the end date.
    """
    baseline_by_task_id = {bt.task_id: bt for bt in baseline_tasks}

    variance: Dict[str, TaskVariance] = {}
    for task in tasks:
        baseline = baseline_by_task_id.get(task.id)
        if baseline is None:
            variance[task.id] = TaskVariance(
                task_id=task.id,
                start_variance=0,
                end_variance=0,
                status=VarianceStatus.ON_TRACK,
                has_baseline=False,
            )
            continue

        start_variance = (task.start_date - baseline.start_date).days
        end_variance = (task.end_date - baseline.end_date).days
        if end_variance > 0:
            status = VarianceStatus.BEHIND
        elif end_variance < 0:
            status = VarianceStatus.AHEAD
        else:
            status = VarianceStatus.ON_TRACK

        variance[task.id] = TaskVariance(
            task_id=task.id,
            start_variance=start_variance,
            end_variance=end_variance,
            status=status,
            has_baseline=True,
        )

    return variance


def format_variance(days: int) -> str:
    if days == 0:
        return "0d"
    return f"{days:+d}d"


__all__ = ["calculate_schedule_variance", "format_variance"]
