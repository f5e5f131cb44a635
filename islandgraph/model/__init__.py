"""Island graph model package."""

from islandgraph.model.network import IslandNetwork

__all__ = ["IslandNetwork"]
