from islandgraph.types.base import VisitKind
from islandgraph.types.dto import BroadcastTrace, Edge, VisitEvent


def test_edge_total_cost():
    assert Edge("B", 10, 5).total_cost == 15
    assert Edge("B", 10).total_cost == 10


def test_edge_from_dict_defaults():
    edge = Edge.from_dict({"target": "B", "travel_cost": 3})
    assert edge == Edge("B", 3, 0)
    assert Edge.from_dict({"target": "B"}).total_cost == 0


def test_visit_event_to_dict_omits_enqueue_fields():
    event = VisitEvent(VisitKind.VISIT, "A", 12.0, population=3)
    assert event.to_dict() == {
        "kind": "visit",
        "node": "A",
        "time": 12.0,
        "population": 3,
    }


def test_broadcast_trace_views():
    trace = BroadcastTrace(
        events=[
            VisitEvent(VisitKind.VISIT, "A", 0),
            VisitEvent(VisitKind.ENQUEUE, "B", 0, source="A", travel_cost=1),
            VisitEvent(VisitKind.VISIT, "B", 1),
        ]
    )
    assert trace.visit_order == ["A", "B"]
    assert len(trace.visits) == 2
    data = trace.to_dict()
    assert data["truncated"] is False
    assert [e["kind"] for e in data["events"]] == ["visit", "enqueue", "visit"]
