"""YAML loader + schema validation for island scenarios.

Parses a YAML string, normalizes island keys, validates against the packaged
JSON schema, and returns a canonical dictionary. ``build_network`` turns the
``islands`` section of that dictionary into an ``IslandNetwork``.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

from islandgraph.logging import get_logger
from islandgraph.model.network import IslandNetwork
from islandgraph.types.dto import Edge
from islandgraph.utils.yaml_utils import normalize_yaml_dict_keys

LOGGER = get_logger(__name__)

RECOGNIZED_KEYS = {"start", "settings", "islands"}


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("islandgraph.schemas")
        .joinpath("scenario.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_scenario_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load, normalize, and validate a scenario YAML string.

    Island names and edge targets are coerced to strings so that YAML keys
    such as ``yes`` or ``42`` still match the edges that reference them.

    Raises:
        ValueError: If the document is not a mapping or has unknown top-level keys.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in scenario: {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    islands = data.get("islands")
    if isinstance(islands, dict):
        data["islands"] = normalize_yaml_dict_keys(islands)

    jsonschema.validate(data, _load_schema())

    if data.get("start") is not None:
        data["start"] = str(data["start"])
    for island in data["islands"].values():
        for edge in (island or {}).get("edges") or []:
            edge["target"] = str(edge["target"])

    return data


def build_network(data: Dict[str, Any]) -> IslandNetwork:
    """Build an ``IslandNetwork`` from a validated scenario dictionary.

    Islands are registered in document order. Edges with a negative total cost
    are kept, with a warning: they defeat the budget threshold.
    """
    network = IslandNetwork()
    for name, island in data.get("islands", {}).items():
        island = island or {}
        edges = [Edge.from_dict(e) for e in island.get("edges") or []]
        for edge in edges:
            if edge.travel_cost < 0 or edge.activity_cost < 0:
                LOGGER.warning(
                    "Edge %s -> %s has a negative cost (travel=%s, activity=%s); "
                    "budget thresholds will not bound paths through it",
                    name,
                    edge.target,
                    edge.travel_cost,
                    edge.activity_cost,
                )
        network.register(name, edges, island.get("population"))
    return network
