"""Scenario class tying a YAML island network to the traversal algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from islandgraph.algorithms.bfs import Clock, broadcast
from islandgraph.algorithms.dfs import max_reachable_count
from islandgraph.algorithms.distribute import plant_resources
from islandgraph.algorithms.priority import rank_by_priority
from islandgraph.config import TraversalConfig
from islandgraph.dsl.loader import build_network, load_scenario_yaml
from islandgraph.logging import get_logger
from islandgraph.model.network import IslandNetwork
from islandgraph.types.base import NodeId
from islandgraph.utils.clock import wall_clock_ms


def _json_number(value: float) -> Any:
    # JSON has no infinity; never-visited priorities are exported as a string
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value


@dataclass
class Scenario:
    """An island network plus the settings used to explore it.

    Typical usage example:

        scenario = Scenario.from_yaml(yaml_str)
        results = scenario.run()
    """

    network: IslandNetwork
    config: TraversalConfig = field(default_factory=TraversalConfig)
    start: Optional[NodeId] = None

    _logger = get_logger(__name__)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "Scenario":
        """Construct a Scenario from a YAML string.

        Raises:
            ValueError: If the YAML or its settings are invalid.
            jsonschema.ValidationError: If the document does not match the schema.
        """
        data = load_scenario_yaml(yaml_str)
        config = TraversalConfig.from_dict(data.get("settings") or {})
        network = build_network(data)
        start = data.get("start")
        if start is None and network.nodes:
            start = network.nodes[0]
        return cls(network=network, config=config, start=start)

    def run(
        self, start: Optional[NodeId] = None, clock: Optional[Clock] = None
    ) -> Dict[str, Any]:
        """Run every traversal from ``start`` and return JSON-ready results.

        The traversals are independent; only broadcast touches the visit
        metadata, and priorities are scored right after it.

        Args:
            start: Start island; defaults to the scenario's ``start``.
            clock: Timestamp source; defaults to wall-clock milliseconds.

        Raises:
            ValueError: If no start island is known.
        """
        start = self.start if start is None else start
        if start is None:
            raise ValueError("Scenario has no islands and no start island was given")
        clock = wall_clock_ms if clock is None else clock
        cfg = self.config

        self._logger.info("Exploring %d island(s) from %r", len(self.network), start)

        max_count = max_reachable_count(self.network, start, cfg.budget_threshold)
        self._logger.info("Maximum unique experiences: %d", max_count)

        trace = broadcast(
            self.network,
            start,
            cfg.visit_interval,
            clock,
            max_steps=cfg.max_broadcast_steps,
        )
        self._logger.info(
            "Knowledge sharing visited %d island(s)%s",
            len(trace.visits),
            " (truncated)" if trace.truncated else "",
        )
        now = clock()
        priorities = rank_by_priority(self.network, now)

        distribution = plant_resources(
            self.network, start, cfg.vehicles, cfg.budget_threshold
        )

        return {
            "start": start,
            "settings": cfg.to_dict(),
            "max_reachable_count": max_count,
            "broadcast": [e.to_dict() for e in trace.events],
            "broadcast_truncated": trace.truncated,
            "resources_planted": distribution.count,
            "planted": list(distribution.planted),
            "priorities": [
                {"node": node, "priority": _json_number(score)}
                for node, score in priorities
            ],
        }
