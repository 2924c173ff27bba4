from .gantt import build_gantt_bars
from .models import GanttTaskBar, TaskVariance
from .variance import calculate_schedule_variance, format_variance

__all__ = [
    "build_gantt_bars",
    "calculate_schedule_variance",
    "format_variance",
    "GanttTaskBar",
    "TaskVariance",
]
