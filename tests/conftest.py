# tests/conftest.py
from datetime import date, timedelta

import pytest

from core.domain import DependencyType, Task, TaskDependency
from core.services.critical_path import CriticalPathEngine

PROJECT_START = date(2024, 1, 1)


def day(offset: int) -> date:
    """Calendar date `offset` days after the project start."""
    return PROJECT_START + timedelta(days=offset)


@pytest.fixture
def engine():
    return CriticalPathEngine()


@pytest.fixture
def make_task():
    def _make(task_id: str, start: int, end: int, **extra) -> Task:
        return Task(
            id=task_id,
            name=extra.pop("name", f"Task {task_id}"),
            start_date=day(start),
            end_date=day(end),
            **extra,
        )

    return _make


@pytest.fixture
def make_dep():
    counter = {"n": 0}

    def _make(
        predecessor_id: str,
        successor_id: str,
        dependency_type: DependencyType = DependencyType.FINISH_TO_START,
    ) -> TaskDependency:
        counter["n"] += 1
        return TaskDependency(
            id=f"dep-{counter['n']}",
            predecessor_task_id=predecessor_id,
            successor_task_id=successor_id,
            dependency_type=dependency_type,
        )

    return _make


@pytest.fixture(name="day")
def day_fixture():
    return day
