from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain import TaskStatus, VarianceStatus


@dataclass
class GanttTaskBar:
    task_id: str
    name: str
    start: date
    end: date
    owner: Optional[str]
    status: TaskStatus
    progress: float
    is_critical: bool
    total_slack: int
    free_slack: int
    # scheduled position; differs from start when a predecessor pushes the task
    earliest_start: date
    # first day after the earliest finish, where total slack begins
    slack_start: date


@dataclass
class TaskVariance:
    task_id: str
    # days, positive = behind baseline, negative = ahead
    start_variance: int
    end_variance: int
    status: VarianceStatus
    has_baseline: bool


__all__ = ["GanttTaskBar", "TaskVariance"]
