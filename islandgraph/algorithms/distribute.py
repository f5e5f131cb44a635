"""Resource distribution gated by a shared pool of vehicles."""

from __future__ import annotations

from typing import Iterator, List, Optional, Set, Tuple

from islandgraph.algorithms.common import VehiclePool, resolve_threshold, within_budget
from islandgraph.logging import get_logger
from islandgraph.model.network import IslandNetwork
from islandgraph.types.base import Cost, NodeId
from islandgraph.types.dto import DistributionResult, Edge

LOGGER = get_logger(__name__)

# (island, cumulative cost, remaining edges, holds a vehicle)
_Frame = Tuple[NodeId, Cost, Iterator[Edge], bool]


def plant_resources(
    network: IslandNetwork,
    start: NodeId,
    vehicle_count: int,
    budget_threshold: Optional[Cost] = None,
) -> DistributionResult:
    """Plant a resource at every island reached from ``start``.

    The start island is planted on entry, before any edge is tried. An edge is
    followed only while a vehicle is free and the cumulative cost from
    ``start`` stays strictly below ``budget_threshold``; the vehicle is
    committed for the whole descent and returned afterwards. An island that
    already received a resource during this call is never planted again,
    whichever path reaches it.

    Descents are kept on an explicit stack, so long chains do not hit the
    interpreter's recursion limit.

    Args:
        network: Graph store to traverse.
        start: Source island.
        vehicle_count: Size of the shared vehicle pool.
        budget_threshold: Strict cost bound; defaults to
            ``TRAVERSAL_CONFIG.budget_threshold``.

    Returns:
        DistributionResult with the planted count and planting order.

    Raises:
        ValueError: If ``vehicle_count`` is negative.
    """
    threshold = resolve_threshold(budget_threshold)
    pool = VehiclePool(vehicle_count)
    distributed: Set[NodeId] = set()
    result = DistributionResult()

    def _plant(node: NodeId, cost: Cost) -> None:
        distributed.add(node)
        result.planted.append(node)
        result.count += 1
        LOGGER.debug(
            "Planted resource at %r (cost so far %s, vehicles free %d)",
            node,
            cost,
            pool.available,
        )

    _plant(start, 0)
    stack: List[_Frame] = [(start, 0, iter(network.edges_of(start)), False)]
    while stack:
        _, cost, edges, _ = stack[-1]
        edge = next(edges, None)
        if edge is None:
            _, _, _, holds_vehicle = stack.pop()
            if holds_vehicle:
                pool.release()
            continue
        new_cost = cost + edge.total_cost
        if not pool or not within_budget(new_cost, threshold):
            continue
        # A vehicle sent to an already planted island comes straight back.
        if edge.target in distributed:
            continue
        pool.acquire()
        _plant(edge.target, new_cost)
        stack.append(
            (edge.target, new_cost, iter(network.edges_of(edge.target)), True)
        )

    LOGGER.info(
        "Total resources planted from %r: %d (vehicles: %d)",
        start,
        result.count,
        vehicle_count,
    )
    return result


def distribute_from(
    network: IslandNetwork,
    start: NodeId,
    vehicle_count: int,
    budget_threshold: Optional[Cost] = None,
) -> int:
    """Return how many distinct islands receive a resource from ``start``.

    See ``plant_resources`` for the traversal rules.
    """
    return plant_resources(network, start, vehicle_count, budget_threshold).count
