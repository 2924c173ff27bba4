import logging

import pytest

from core.domain import Task
from core.exceptions import BusinessRuleError, CyclicDependencyError
from core.services.critical_path.graph import build_task_nodes, task_duration_days
from core.services.critical_path.sequencing import topological_order


def test_duration_is_inclusive_and_clamped(make_task, day):
    assert task_duration_days(make_task("A", 0, 4)) == 5
    assert task_duration_days(make_task("B", 3, 3)) == 1

    backwards = Task(id="C", name="Backwards", start_date=day(5), end_date=day(2))
    assert task_duration_days(backwards) == 1


def test_build_nodes_links_predecessors_and_successors(make_task, make_dep):
    tasks = [make_task("A", 0, 1), make_task("B", 2, 3), make_task("C", 2, 5)]

    nodes = build_task_nodes(tasks, [make_dep("A", "B"), make_dep("A", "C")])

    assert nodes["A"].successors == ["B", "C"]
    assert nodes["A"].predecessors == []
    assert nodes["B"].predecessors == ["A"]
    assert nodes["C"].duration == 4


def test_build_nodes_drops_unknown_endpoints_with_warning(make_task, make_dep, caplog):
    tasks = [make_task("A", 0, 1), make_task("B", 2, 3)]
    deps = [make_dep("A", "B"), make_dep("A", "GHOST"), make_dep("MISSING", "B")]

    with caplog.at_level(logging.WARNING, logger="core.services.critical_path.graph"):
        nodes = build_task_nodes(tasks, deps)

    assert nodes["A"].successors == ["B"]
    assert nodes["B"].predecessors == ["A"]
    assert sum("Ignoring dependency" in r.getMessage() for r in caplog.records) == 2


def test_unknown_endpoints_do_not_fail_the_calculation(engine, make_task, make_dep):
    tasks = [make_task("A", 0, 4), make_task("B", 5, 9)]

    result = engine.calculate(tasks, [make_dep("A", "B"), make_dep("B", "NOPE")])

    assert set(result.task_slack) == {"A", "B"}
    assert result.critical_task_ids == {"A", "B"}


def test_duplicate_edges_are_kept_and_harmless(engine, make_task, make_dep):
    tasks = [make_task("A", 0, 4), make_task("B", 5, 6), make_task("C", 5, 12)]
    single = [make_dep("A", "B"), make_dep("A", "C")]
    doubled = single + [make_dep("A", "B")]

    nodes = build_task_nodes(tasks, doubled)
    assert nodes["A"].successors == ["B", "C", "B"]

    assert engine.calculate(tasks, doubled).task_slack == engine.calculate(tasks, single).task_slack


def test_sequence_follows_start_date_without_dependencies(make_task):
    tasks = [make_task("late", 9, 10), make_task("early", 0, 1), make_task("mid", 4, 5)]

    order = topological_order(build_task_nodes(tasks, []))

    assert order == ["early", "mid", "late"]


def test_sequence_ties_keep_input_order(make_task):
    tasks = [make_task("X", 3, 4), make_task("Y", 3, 5), make_task("Z", 0, 1)]

    assert topological_order(build_task_nodes(tasks, [])) == ["Z", "X", "Y"]


def test_sequence_puts_predecessors_first(make_task, make_dep):
    # B is planned before A but depends on it
    tasks = [make_task("B", 0, 2), make_task("A", 5, 6), make_task("C", 1, 2)]
    deps = [make_dep("A", "B"), make_dep("C", "A")]

    order = topological_order(build_task_nodes(tasks, deps))

    assert order == ["C", "A", "B"]


def test_two_task_cycle_raises_typed_error(engine, make_task, make_dep):
    tasks = [make_task("A", 0, 1), make_task("B", 2, 3)]

    with pytest.raises(CyclicDependencyError) as exc:
        engine.calculate(tasks, [make_dep("A", "B"), make_dep("B", "A")])

    err = exc.value
    assert isinstance(err, BusinessRuleError)
    assert err.code == "SCHEDULE_CYCLE"
    assert (err.predecessor_id, err.successor_id) == ("A", "B")
    assert err.cycle == ["A", "B", "A"]
    assert "A -> B" in str(err)


def test_longer_cycle_reports_full_path(make_task, make_dep):
    tasks = [make_task("A", 0, 1), make_task("B", 1, 2), make_task("C", 2, 3), make_task("D", 0, 9)]
    deps = [make_dep("A", "B"), make_dep("B", "C"), make_dep("C", "A"), make_dep("D", "A")]

    with pytest.raises(CyclicDependencyError) as exc:
        topological_order(build_task_nodes(tasks, deps))

    assert exc.value.cycle == ["A", "B", "C", "A"]


def test_self_dependency_is_a_cycle(engine, make_task, make_dep):
    with pytest.raises(CyclicDependencyError) as exc:
        engine.calculate([make_task("A", 0, 1)], [make_dep("A", "A")])

    assert exc.value.cycle == ["A", "A"]


def test_deep_chain_does_not_exhaust_the_stack(engine, make_task, make_dep):
    count = 5000
    tasks = [make_task(f"T{i}", i, i) for i in range(count)]
    # dependencies run against calendar order, so the first seed walks the whole chain
    deps = [make_dep(f"T{i + 1}", f"T{i}") for i in range(count - 1)]

    result = engine.calculate(tasks, deps)

    assert result.project_end == 2 * count - 1
    assert len(result.critical_task_ids) == count
