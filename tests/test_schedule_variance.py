from datetime import timedelta

from core.domain import BaselineTask, VarianceStatus
from core.services.reporting import calculate_schedule_variance, format_variance


def test_variance_against_baseline_snapshot(make_task):
    planned = [make_task("A", 0, 4), make_task("B", 5, 9), make_task("C", 10, 12)]
    baseline = [BaselineTask.snapshot("bl-1", task) for task in planned]

    current = [
        make_task("A", 0, 4),
        make_task("B", 7, 12),
        make_task("C", 8, 10),
        make_task("D", 13, 14),
    ]

    variance = calculate_schedule_variance(current, baseline)

    assert variance["A"].status == VarianceStatus.ON_TRACK
    assert (variance["A"].start_variance, variance["A"].end_variance) == (0, 0)

    assert variance["B"].status == VarianceStatus.BEHIND
    assert (variance["B"].start_variance, variance["B"].end_variance) == (2, 3)

    assert variance["C"].status == VarianceStatus.AHEAD
    assert variance["C"].end_variance == -2
    assert variance["C"].has_baseline is True


def test_task_added_after_baseline_has_no_variance(make_task):
    variance = calculate_schedule_variance([make_task("NEW", 3, 5)], [])

    row = variance["NEW"]
    assert row.has_baseline is False
    assert row.status == VarianceStatus.ON_TRACK
    assert (row.start_variance, row.end_variance) == (0, 0)


def test_status_follows_end_date_only(make_task, day):
    task = make_task("A", 2, 6)
    baseline = BaselineTask(
        id="bt-1",
        baseline_id="bl-1",
        task_id="A",
        start_date=day(0),
        end_date=day(6) + timedelta(days=1),
    )

    row = calculate_schedule_variance([task], [baseline])["A"]

    assert row.start_variance == 2
    assert row.status == VarianceStatus.AHEAD


def test_format_variance():
    assert format_variance(0) == "0d"
    assert format_variance(3) == "+3d"
    assert format_variance(-2) == "-2d"


def test_baseline_snapshot_copies_dates_with_fresh_ids(make_task):
    task = make_task("A", 3, 7)

    first = BaselineTask.snapshot("bl-1", task)
    second = BaselineTask.snapshot("bl-2", task)

    assert (first.task_id, first.start_date, first.end_date) == ("A", task.start_date, task.end_date)
    assert first.baseline_id == "bl-1"
    assert first.id and second.id and first.id != second.id
