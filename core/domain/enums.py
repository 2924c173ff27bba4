from __future__ import annotations

from enum import Enum


class TaskStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class DependencyType(str, Enum):
    """Relation kind between two tasks.

    Timing arithmetic treats every kind as finish-to-start; the kind is kept
    for chart arrow routing.
    """

    FINISH_TO_START = "finish_to_start"
    START_TO_START = "start_to_start"
    FINISH_TO_FINISH = "finish_to_finish"
    START_TO_FINISH = "start_to_finish"


class VarianceStatus(str, Enum):
    AHEAD = "ahead"
    ON_TRACK = "on_track"
    BEHIND = "behind"


__all__ = ["TaskStatus", "DependencyType", "VarianceStatus"]
