"""Population/recency priority scoring."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Tuple

from islandgraph.model.network import IslandNetwork
from islandgraph.types.base import NEVER_VISITED, NodeId


def priority(network: IslandNetwork, node: NodeId, now: float) -> float:
    """Score ``node`` as ``population * (now - last_visit)``.

    A never-visited island (including unregistered ones) scores ``math.inf``
    regardless of its population; no ``0 * inf`` product is ever formed.
    Missing population counts as 0. Reads metadata only.
    """
    last_visit = network.last_visit(node)
    if last_visit == NEVER_VISITED:
        return math.inf
    population = network.population(node) or 0
    return population * (now - last_visit)


def rank_by_priority(
    network: IslandNetwork,
    now: float,
    nodes: Optional[Iterable[NodeId]] = None,
) -> List[Tuple[NodeId, float]]:
    """Return ``(node, priority)`` pairs, highest priority first.

    Args:
        network: Graph store holding the metadata.
        now: Current timestamp.
        nodes: Islands to rank; defaults to every registered island.

    Returns:
        Pairs sorted by descending priority; ties keep input order.
    """
    candidates = list(network.nodes if nodes is None else nodes)
    scored = [(node, priority(network, node, now)) for node in candidates]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)
