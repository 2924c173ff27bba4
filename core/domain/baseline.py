from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.domain.task import Task, generate_id


@dataclass(frozen=True)
class BaselineTask:
    """Snapshot of a task's planned dates at the time a baseline was taken."""

    id: str
    baseline_id: str
    task_id: str
    start_date: date
    end_date: date

    @staticmethod
    def snapshot(baseline_id: str, task: Task) -> "BaselineTask":
        return BaselineTask(
            id=generate_id(),
            baseline_id=baseline_id,
            task_id=task.id,
            start_date=task.start_date,
            end_date=task.end_date,
        )


__all__ = ["BaselineTask"]
