"""Island graph store: adjacency lists plus per-island metadata.

``IslandNetwork`` owns the outgoing edge list of every registered island and
the optional population / last-visit metadata read by the priority scorer and
written by the broadcast traversal. Islands referenced only as edge targets
are valid destinations with no outgoing edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from islandgraph.logging import get_logger
from islandgraph.types.base import NEVER_VISITED, Cost, NodeId
from islandgraph.types.dto import Edge, NodeMeta

LOGGER = get_logger(__name__)

EdgeLike = Union[Edge, Mapping[str, Any]]

_NO_EDGES: Tuple[Edge, ...] = ()


def _coerce_edge(item: EdgeLike) -> Edge:
    if isinstance(item, Edge):
        return item
    if isinstance(item, Mapping) and "target" in item:
        return Edge.from_dict(item)
    raise TypeError(
        f"Edge must be an Edge or a mapping with a 'target' key, got {type(item).__name__}"
    )


@dataclass
class IslandNetwork:
    """A directed, weighted graph of islands.

    Attributes:
        adjacency (Dict[NodeId, Tuple[Edge, ...]]): Outgoing edges per registered island.
        meta (Dict[NodeId, NodeMeta]): Population and last-visit metadata.
    """

    adjacency: Dict[NodeId, Tuple[Edge, ...]] = field(default_factory=dict)
    meta: Dict[NodeId, NodeMeta] = field(default_factory=dict)

    def register(
        self,
        node: NodeId,
        edges: Iterable[EdgeLike] = (),
        population: Optional[Cost] = None,
    ) -> None:
        """Insert or replace an island's outgoing edge list.

        When ``population`` is given, the island's metadata is (re)initialized
        with that population and ``last_visit`` set to NEVER_VISITED.

        Args:
            node: Island identifier.
            edges: Outgoing edges in traversal order (``Edge`` or mappings).
            population: Optional island population.

        Raises:
            TypeError: If an edge item is neither an Edge nor a mapping.
        """
        self.adjacency[node] = tuple(_coerce_edge(e) for e in edges)
        if population is not None:
            self.meta[node] = NodeMeta(population=population)
        LOGGER.debug(
            "Registered island %r with %d edge(s), population=%r",
            node,
            len(self.adjacency[node]),
            population,
        )

    def edges_of(self, node: NodeId) -> Tuple[Edge, ...]:
        """Return the outgoing edges of ``node``; empty if it was never registered."""
        return self.adjacency.get(node, _NO_EDGES)

    def neighbors(self, node: NodeId) -> List[NodeId]:
        return [edge.target for edge in self.edges_of(node)]

    def population(self, node: NodeId) -> Optional[Cost]:
        meta = self.meta.get(node)
        return meta.population if meta is not None else None

    def last_visit(self, node: NodeId) -> float:
        meta = self.meta.get(node)
        return meta.last_visit if meta is not None else NEVER_VISITED

    def mark_visited(self, node: NodeId, now: float) -> float:
        """Record a broadcast visit of ``node`` at time ``now``.

        Metadata is created for islands that have none. ``last_visit`` never
        moves backwards; the stored value is returned.
        """
        meta = self.meta.get(node)
        if meta is None:
            meta = self.meta[node] = NodeMeta()
        if now > meta.last_visit:
            meta.last_visit = now
        return meta.last_visit

    def reset_visits(self) -> None:
        """Forget every recorded visit."""
        for meta in self.meta.values():
            meta.last_visit = NEVER_VISITED

    @property
    def nodes(self) -> List[NodeId]:
        """Registered islands in registration order."""
        return list(self.adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self.adjacency

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly view of islands, edges and metadata."""
        islands: Dict[str, Any] = {}
        for node, edges in self.adjacency.items():
            entry: Dict[str, Any] = {"edges": [e.to_dict() for e in edges]}
            population = self.population(node)
            if population is not None:
                entry["population"] = population
            islands[str(node)] = entry
        return {"islands": islands}
