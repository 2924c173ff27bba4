from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import uuid4

from core.domain.enums import DependencyType, TaskStatus


def generate_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class Task:
    id: str
    name: str
    start_date: date
    end_date: date
    project_id: Optional[str] = None
    description: str = ""
    owner: Optional[str] = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    progress: float = 0.0


@dataclass(frozen=True)
class TaskDependency:
    id: str
    predecessor_task_id: str
    successor_task_id: str
    dependency_type: DependencyType = DependencyType.FINISH_TO_START


__all__ = ["generate_id", "Task", "TaskDependency"]
