from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set

from core.domain import Task


@dataclass
class TaskNode:
    task: Task
    duration: int
    earliest_start: int = 0
    earliest_finish: int = 0
    latest_start: int = 0
    latest_finish: int = 0
    slack: int = 0
    predecessors: List[str] = field(default_factory=list)
    successors: List[str] = field(default_factory=list)

    @property
    def task_id(self) -> str:
        return self.task.id


@dataclass
class TaskSlackInfo:
    task_id: str
    # days the task can slip without moving the project end
    total_slack: int
    # days the task can slip without moving any successor
    free_slack: int
    earliest_start: int
    latest_start: int
    is_critical: bool


@dataclass
class CriticalPathResult:
    critical_task_ids: Set[str] = field(default_factory=set)
    task_slack: Dict[str, TaskSlackInfo] = field(default_factory=dict)
    project_end: int = 0


@dataclass
class CriticalPathStats:
    total_tasks: int
    critical_tasks: int
    project_duration: int
    critical_path_duration: int


__all__ = ["TaskNode", "TaskSlackInfo", "CriticalPathResult", "CriticalPathStats"]
