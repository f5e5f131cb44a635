"""Scenario file parsing."""

from islandgraph.dsl.loader import build_network, load_scenario_yaml

__all__ = ["load_scenario_yaml", "build_network"]
