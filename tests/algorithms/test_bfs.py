import logging

import pytest

from islandgraph.algorithms.bfs import broadcast
from islandgraph.model.network import IslandNetwork
from islandgraph.types.base import NEVER_VISITED, VisitKind
from islandgraph.types.dto import Edge
from islandgraph.utils.clock import StepClock


def test_broadcast_visits_in_breadth_first_order(experiences):
    trace = broadcast(experiences, "e1", 10_000, StepClock())

    assert trace.visit_order == ["e1", "e2", "e3", "e4", "e5"]
    assert not trace.truncated
    assert [(e.kind, e.node) for e in trace.events] == [
        (VisitKind.VISIT, "e1"),
        (VisitKind.ENQUEUE, "e2"),
        (VisitKind.ENQUEUE, "e3"),
        (VisitKind.VISIT, "e2"),
        (VisitKind.ENQUEUE, "e4"),
        (VisitKind.VISIT, "e3"),
        (VisitKind.ENQUEUE, "e5"),
        (VisitKind.VISIT, "e4"),
        (VisitKind.VISIT, "e5"),
    ]


def test_broadcast_stamps_last_visit(experiences):
    broadcast(experiences, "e1", 10_000, StepClock(start=100))

    assert experiences.last_visit("e1") == 100
    assert experiences.last_visit("e2") == 101
    assert experiences.last_visit("e3") == 102
    assert experiences.last_visit("e4") == 103
    # unregistered target gets metadata on first visit
    assert experiences.last_visit("e5") == 104
    assert experiences.population("e5") is None


def test_visit_events_carry_population_and_travel_cost(experiences):
    trace = broadcast(experiences, "e1", 10_000, StepClock())

    first = trace.events[0]
    assert first.population == 1000 and first.time == 0
    enqueue_e3 = trace.events[2]
    assert enqueue_e3.source == "e1"
    assert enqueue_e3.travel_cost == 15
    assert enqueue_e3.to_dict() == {
        "kind": "enqueue",
        "node": "e3",
        "time": 0,
        "population": 500,
        "source": "e1",
        "travel_cost": 15,
    }


def test_unregistered_start():
    net = IslandNetwork()
    trace = broadcast(net, "lonely", 0, StepClock())
    assert trace.visit_order == ["lonely"]


def test_cycle_with_zero_interval_needs_external_bound(two_cycle):
    trace = broadcast(two_cycle, "A", 0, StepClock(), max_steps=10)

    assert trace.truncated
    assert trace.visit_order == ["A", "B"] * 5


def test_truncation_is_logged(two_cycle, caplog):
    with caplog.at_level(logging.WARNING, logger="islandgraph"):
        broadcast(two_cycle, "A", 0, StepClock(), max_steps=3)
    assert any("stopped after 3 step(s)" in r.message for r in caplog.records)


def test_cycle_with_frozen_clock_terminates(two_cycle):
    # elapsed time never exceeds the interval, so seen islands are not re-admitted
    trace = broadcast(two_cycle, "A", 0, StepClock(step=0))
    assert trace.visit_order == ["A", "B"]
    assert not trace.truncated


def test_cycle_with_large_interval_terminates(two_cycle):
    trace = broadcast(two_cycle, "A", 1_000, StepClock())
    assert trace.visit_order == ["A", "B"]


def test_revisit_after_interval_elapses():
    # B is seen twice: directly from A, and from C once it is stale again
    net = IslandNetwork()
    net.register("A", [Edge("B", 1), Edge("C", 1)])
    net.register("B", [])
    net.register("C", [Edge("B", 1)])

    trace = broadcast(net, "A", 0, StepClock())
    assert trace.visit_order == ["A", "B", "C", "B"]

    net.reset_visits()
    trace = broadcast(net, "A", 5, StepClock())
    assert trace.visit_order == ["A", "B", "C"]


def test_queued_but_unstamped_island_is_readmitted():
    # B is queued from A but not yet visited when C looks at it
    net = IslandNetwork()
    net.register("A", [Edge("C", 1), Edge("B", 1)])
    net.register("C", [Edge("B", 1)])
    net.register("B", [])

    trace = broadcast(net, "A", 1_000, StepClock())
    assert trace.visit_order == ["A", "C", "B", "B"]


def test_previous_broadcast_affects_readmission(two_cycle):
    clock = StepClock()
    broadcast(two_cycle, "A", 100, clock)
    assert two_cycle.last_visit("A") == 0
    assert two_cycle.last_visit("B") == 1

    # A is restamped first, so B finds it fresh and does not re-admit it
    trace = broadcast(two_cycle, "A", 100, clock)
    assert trace.visit_order == ["A", "B"]
    assert two_cycle.last_visit("A") == 2


def test_last_visit_never_moves_backwards(two_cycle):
    two_cycle.mark_visited("A", 50)
    broadcast(two_cycle, "A", 1_000, StepClock(start=10, step=0))
    assert two_cycle.last_visit("A") == 50
    assert two_cycle.last_visit("B") == 10


def test_reset_visits(experiences):
    broadcast(experiences, "e1", 10, StepClock())
    experiences.reset_visits()
    assert all(experiences.last_visit(n) == NEVER_VISITED for n in experiences)


def test_invalid_max_steps(two_cycle):
    with pytest.raises(ValueError):
        broadcast(two_cycle, "A", 0, StepClock(), max_steps=0)
