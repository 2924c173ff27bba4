from core.domain.baseline import BaselineTask
from core.domain.enums import DependencyType, TaskStatus, VarianceStatus
from core.domain.task import Task, TaskDependency, generate_id

__all__ = [
    "generate_id",
    "TaskStatus",
    "DependencyType",
    "VarianceStatus",
    "Task",
    "TaskDependency",
    "BaselineTask",
]
