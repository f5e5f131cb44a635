"""islandgraph: budget-constrained exploration of island networks.

A weighted directed graph of islands, each edge carrying a travel cost and an
activity cost, explored three ways:

    max_reachable_count() - Most distinct islands on one path under a budget
    broadcast()           - Breadth-first visits with a revisit interval
    distribute_from()     - Resource planting gated by a shared vehicle pool
    priority()            - Population times time since last visit

Example:
    from islandgraph import Edge, IslandNetwork, max_reachable_count

    net = IslandNetwork()
    net.register("A", [Edge("B", 10, 5), Edge("C", 15, 8)], population=1000)
    net.register("B", [Edge("D", 20, 12)], population=800)

    max_reachable_count(net, "A")  # 3
"""

from __future__ import annotations

from islandgraph import cli, logging
from islandgraph._version import __version__
from islandgraph.algorithms import (
    broadcast,
    distribute_from,
    max_reachable_count,
    plant_resources,
    priority,
    rank_by_priority,
)
from islandgraph.config import TRAVERSAL_CONFIG, TraversalConfig
from islandgraph.lib.nx import from_networkx, to_networkx
from islandgraph.model.network import IslandNetwork
from islandgraph.scenario import Scenario
from islandgraph.types import (
    NEVER_VISITED,
    BroadcastTrace,
    DistributionResult,
    Edge,
    VisitEvent,
    VisitKind,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "IslandNetwork",
    "Edge",
    "Scenario",
    # Algorithms
    "max_reachable_count",
    "priority",
    "rank_by_priority",
    "broadcast",
    "distribute_from",
    "plant_resources",
    # Types
    "NEVER_VISITED",
    "VisitEvent",
    "VisitKind",
    "BroadcastTrace",
    "DistributionResult",
    # Configuration
    "TraversalConfig",
    "TRAVERSAL_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
