"""Breadth-first broadcast ("knowledge sharing") with a revisit-interval policy."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Optional, Set

from islandgraph.logging import get_logger
from islandgraph.model.network import IslandNetwork
from islandgraph.types.base import NodeId, VisitKind
from islandgraph.types.dto import BroadcastTrace, VisitEvent

LOGGER = get_logger(__name__)

Clock = Callable[[], float]


def broadcast(
    network: IslandNetwork,
    start: NodeId,
    visit_interval: float,
    clock: Clock,
    max_steps: Optional[int] = None,
) -> BroadcastTrace:
    """Visit every island reachable from ``start`` in breadth-first order.

    Each dequeued island is stamped with ``clock()`` as its ``last_visit``.
    An edge target is enqueued if it has not been seen in this traversal, or
    if more than ``visit_interval`` has elapsed since its last recorded visit
    (from this traversal or an earlier one). Islands never visited have
    unbounded elapsed time.

    With a cycle and a small enough ``visit_interval`` the same islands keep
    being re-admitted and the traversal never ends on its own. Callers must
    choose a sane interval or pass ``max_steps``.

    Args:
        network: Graph store; ``last_visit`` metadata is updated in place.
        start: Island to start from.
        visit_interval: Minimum elapsed time before re-admitting a seen island.
        clock: Zero-argument callable returning the current timestamp. Read
            once per dequeue; the same value stamps the island and ages its
            neighbors.
        max_steps: Optional bound on the number of dequeues.

    Returns:
        BroadcastTrace with visit/enqueue events and a truncation flag.

    Raises:
        ValueError: If ``max_steps`` is given and is less than 1.
    """
    if max_steps is not None and max_steps < 1:
        raise ValueError(f"max_steps must be at least 1, got {max_steps}")

    trace = BroadcastTrace()
    queue: Deque[NodeId] = deque([start])
    seen: Set[NodeId] = {start}
    steps = 0

    LOGGER.debug("Starting knowledge sharing journey from %r", start)
    while queue:
        if max_steps is not None and steps >= max_steps:
            trace.truncated = True
            LOGGER.warning(
                "Broadcast from %r stopped after %d step(s) with %d island(s) still queued",
                start,
                steps,
                len(queue),
            )
            break

        current = queue.popleft()
        now = clock()
        stamped = network.mark_visited(current, now)
        steps += 1
        population = network.population(current)
        trace.events.append(
            VisitEvent(VisitKind.VISIT, current, stamped, population=population)
        )
        LOGGER.debug(
            "Visited %r with population %r at time %s", current, population, stamped
        )

        for edge in network.edges_of(current):
            target = edge.target
            if target in seen and now - network.last_visit(target) <= visit_interval:
                continue
            seen.add(target)
            queue.append(target)
            trace.events.append(
                VisitEvent(
                    VisitKind.ENQUEUE,
                    target,
                    now,
                    population=network.population(target),
                    source=current,
                    travel_cost=edge.travel_cost,
                )
            )
            LOGGER.debug(
                "Queueing %r for visit with travel time %s", target, edge.travel_cost
            )

    LOGGER.debug("Broadcast from %r finished after %d visit(s)", start, steps)
    return trace
