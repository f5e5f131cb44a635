"""Shared typing constructs for islandgraph.

Aliases, sentinels and the small records passed between the graph store, the
traversal algorithms and their callers. Contains no traversal logic.
"""

from islandgraph.types.base import NEVER_VISITED, Cost, NodeId, VisitKind
from islandgraph.types.dto import (
    BroadcastTrace,
    DistributionResult,
    Edge,
    NodeMeta,
    VisitEvent,
)

__all__ = [
    # Aliases and constants
    "Cost",
    "NodeId",
    "NEVER_VISITED",
    "VisitKind",
    # DTOs
    "Edge",
    "NodeMeta",
    "VisitEvent",
    "DistributionResult",
    "BroadcastTrace",
]
