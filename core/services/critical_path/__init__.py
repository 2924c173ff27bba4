from .engine import (
    CriticalPathEngine,
    calculate_critical_path,
    calculate_critical_path_with_slack,
    get_critical_path_stats,
)
from .models import CriticalPathResult, CriticalPathStats, TaskNode, TaskSlackInfo

__all__ = [
    "CriticalPathEngine",
    "calculate_critical_path",
    "calculate_critical_path_with_slack",
    "get_critical_path_stats",
    "CriticalPathResult",
    "CriticalPathStats",
    "TaskNode",
    "TaskSlackInfo",
]
