"""Helpers shared by the depth-first traversals."""

from __future__ import annotations

from typing import Optional

from islandgraph.config import TRAVERSAL_CONFIG
from islandgraph.types.base import Cost


def resolve_threshold(budget_threshold: Optional[Cost]) -> Cost:
    """Return ``budget_threshold`` or the configured default when None."""
    if budget_threshold is None:
        return TRAVERSAL_CONFIG.budget_threshold
    return budget_threshold


def within_budget(cost: Cost, budget_threshold: Cost) -> bool:
    """Strict budget check: a path costing exactly the threshold is rejected."""
    return cost < budget_threshold


class VehiclePool:
    """Shared, depletable counter of vehicles available for descents.

    ``available`` always equals the initial count minus the number of
    ``acquire()`` calls not yet matched by ``release()``.
    """

    def __init__(self, vehicles: int) -> None:
        if vehicles < 0:
            raise ValueError(f"Vehicle count must be non-negative, got {vehicles}")
        self.capacity = vehicles
        self.available = vehicles

    def __bool__(self) -> bool:
        return self.available > 0

    @property
    def in_use(self) -> int:
        return self.capacity - self.available

    def acquire(self) -> None:
        """Commit one vehicle to a descent."""
        if self.available <= 0:
            raise RuntimeError("No vehicles available to dispatch")
        self.available -= 1

    def release(self) -> None:
        """Return one committed vehicle to the pool."""
        if self.available >= self.capacity:
            raise RuntimeError("No dispatched vehicle to return")
        self.available += 1
