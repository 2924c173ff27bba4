from .critical_path import (
    CriticalPathEngine,
    CriticalPathResult,
    CriticalPathStats,
    TaskSlackInfo,
    calculate_critical_path,
    calculate_critical_path_with_slack,
    get_critical_path_stats,
)
from .reporting import (
    GanttTaskBar,
    TaskVariance,
    build_gantt_bars,
    calculate_schedule_variance,
    format_variance,
)

__all__ = [
    "CriticalPathEngine",
    "CriticalPathResult",
    "CriticalPathStats",
    "TaskSlackInfo",
    "calculate_critical_path",
    "calculate_critical_path_with_slack",
    "get_critical_path_stats",
    "GanttTaskBar",
    "TaskVariance",
    "build_gantt_bars",
    "calculate_schedule_variance",
    "format_variance",
]
