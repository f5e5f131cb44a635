"""Configuration classes for islandgraph traversals."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional


@dataclass
class TraversalConfig:
    """Defaults shared by the traversal algorithms and the scenario runner."""

    # Strict upper bound on cumulative path cost (a path costing exactly this is rejected)
    budget_threshold: float = 100.0

    # Minimum elapsed time (ms) before broadcast re-admits an already seen island
    visit_interval: float = 10_000.0

    # Size of the shared vehicle pool used by resource distribution
    vehicles: int = 3

    # External bound on broadcast dequeues; None means unbounded
    max_broadcast_steps: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TraversalConfig":
        """Build a config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of field name to value.

        Returns:
            A new TraversalConfig.

        Raises:
            ValueError: If a key is unknown or a value has the wrong type.
        """
        known = {f.name for f in fields(cls)}
        extra = set(data) - known
        if extra:
            raise ValueError(
                f"Unrecognized setting(s): {', '.join(sorted(extra))}. "
                f"Allowed settings are {sorted(known)}"
            )

        cfg = cls(**dict(data))
        if isinstance(cfg.vehicles, bool) or not isinstance(cfg.vehicles, int):
            raise ValueError(f"'vehicles' must be an integer, got {cfg.vehicles!r}")
        if cfg.vehicles < 0:
            raise ValueError(f"'vehicles' must be non-negative, got {cfg.vehicles}")
        if cfg.max_broadcast_steps is not None and (
            isinstance(cfg.max_broadcast_steps, bool)
            or not isinstance(cfg.max_broadcast_steps, int)
            or cfg.max_broadcast_steps < 1
        ):
            raise ValueError(
                "'max_broadcast_steps' must be a positive integer or null, "
                f"got {cfg.max_broadcast_steps!r}"
            )
        return cfg

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Global configuration instance
TRAVERSAL_CONFIG = TraversalConfig()
