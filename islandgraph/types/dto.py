"""Immutable records exchanged between the graph store, traversals and callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from islandgraph.types.base import NEVER_VISITED, Cost, NodeId, VisitKind


@dataclass(frozen=True)
class Edge:
    """Directed connection to ``target`` owned by its source island.

    Attributes:
        target: Destination island.
        travel_cost: Cost of moving along the edge.
        activity_cost: Cost of the activity (experience, planting) at the target.
    """

    target: NodeId
    travel_cost: Cost
    activity_cost: Cost = 0

    @property
    def total_cost(self) -> Cost:
        """Cost added to a running path total when traversing this edge."""
        return self.travel_cost + self.activity_cost

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Edge":
        """Build an edge from a mapping with ``target`` and cost keys."""
        return cls(
            target=data["target"],
            travel_cost=data.get("travel_cost", 0),
            activity_cost=data.get("activity_cost", 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "travel_cost": self.travel_cost,
            "activity_cost": self.activity_cost,
        }


@dataclass
class NodeMeta:
    """Mutable per-island metadata shared by broadcast and priority scoring.

    Attributes:
        population: Island population, or None when registered without one.
        last_visit: Timestamp of the latest broadcast visit.
    """

    population: Optional[Cost] = None
    last_visit: float = NEVER_VISITED


@dataclass(frozen=True)
class VisitEvent:
    """One entry of a broadcast trace.

    ``VISIT`` events are recorded when an island is dequeued and stamped;
    ``ENQUEUE`` events when an edge admits its target to the work queue.
    """

    kind: VisitKind
    node: NodeId
    time: float
    population: Optional[Cost] = None
    source: Optional[NodeId] = None
    travel_cost: Optional[Cost] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "kind": self.kind.value,
            "node": self.node,
            "time": self.time,
            "population": self.population,
        }
        if self.kind is VisitKind.ENQUEUE:
            data["source"] = self.source
            data["travel_cost"] = self.travel_cost
        return data


@dataclass
class DistributionResult:
    """Outcome of one resource-distribution call.

    Attributes:
        count: Number of distinct islands that received a resource.
        planted: Islands in the order resources were planted.
    """

    count: int = 0
    planted: List[NodeId] = field(default_factory=list)


@dataclass
class BroadcastTrace:
    """Events recorded by one broadcast traversal.

    Attributes:
        events: Visit and enqueue events in the order they happened.
        truncated: True when an external step bound stopped the traversal
            with work still queued.
    """

    events: List[VisitEvent] = field(default_factory=list)
    truncated: bool = False

    @property
    def visits(self) -> List[VisitEvent]:
        return [e for e in self.events if e.kind is VisitKind.VISIT]

    @property
    def visit_order(self) -> List[NodeId]:
        """Islands in dequeue order (repeats included)."""
        return [e.node for e in self.visits]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "events": [e.to_dict() for e in self.events],
            "truncated": self.truncated,
        }
