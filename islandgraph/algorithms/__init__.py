"""Traversal algorithms over an ``IslandNetwork``."""

from islandgraph.algorithms.bfs import broadcast
from islandgraph.algorithms.dfs import max_reachable_count
from islandgraph.algorithms.distribute import distribute_from, plant_resources
from islandgraph.algorithms.priority import priority, rank_by_priority

__all__ = [
    "max_reachable_count",
    "priority",
    "rank_by_priority",
    "broadcast",
    "distribute_from",
    "plant_resources",
]
