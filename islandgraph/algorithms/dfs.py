"""Budget-constrained depth-first enumeration of simple paths."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Set, Tuple

from islandgraph.algorithms.common import resolve_threshold, within_budget
from islandgraph.logging import get_logger
from islandgraph.model.network import IslandNetwork
from islandgraph.types.base import Cost, NodeId
from islandgraph.types.dto import Edge

LOGGER = get_logger(__name__)

PathCallback = Callable[[Tuple[NodeId, ...]], None]


def max_reachable_count(
    network: IslandNetwork,
    start: NodeId,
    budget_threshold: Optional[Cost] = None,
    on_path_visit: Optional[PathCallback] = None,
) -> int:
    """Return the most distinct islands visitable on one simple path from ``start``.

    A path may be extended along an edge only while the running sum of
    ``travel_cost + activity_cost`` stays strictly below ``budget_threshold``.
    The start island always counts, so the result is at least 1.

    The search runs over an explicit stack of per-island edge iterators, so
    path length is limited by memory rather than the interpreter's recursion
    limit. Negative edge costs are accepted but let paths exceed what the
    threshold is meant to allow; callers must constrain them.

    Args:
        network: Graph store to traverse.
        start: Start island (need not be registered).
        budget_threshold: Strict cost bound; defaults to
            ``TRAVERSAL_CONFIG.budget_threshold``.
        on_path_visit: Optional callback receiving the current path (start
            first) each time the search enters an island.

    Returns:
        Maximum number of islands on any admissible path.
    """
    threshold = resolve_threshold(budget_threshold)
    visited: Set[NodeId] = {start}
    path: List[NodeId] = [start]
    costs: List[Cost] = [0]
    pending: List[Iterator[Edge]] = [iter(network.edges_of(start))]
    best = 1
    if on_path_visit is not None:
        on_path_visit(tuple(path))

    while pending:
        edge = next(pending[-1], None)
        if edge is None:
            # Island exhausted: take it off the path.
            pending.pop()
            costs.pop()
            visited.discard(path.pop())
            continue
        if edge.target in visited:
            continue
        new_cost = costs[-1] + edge.total_cost
        if not within_budget(new_cost, threshold):
            continue

        visited.add(edge.target)
        path.append(edge.target)
        costs.append(new_cost)
        pending.append(iter(network.edges_of(edge.target)))
        best = max(best, len(path))
        if on_path_visit is not None:
            on_path_visit(tuple(path))

    LOGGER.debug(
        "Max reachable count from %r under threshold %s: %d", start, threshold, best
    )
    return best
