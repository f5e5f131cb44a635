import json
from pathlib import Path

import jsonschema
import pytest

from islandgraph.scenario import Scenario
from islandgraph.utils.clock import StepClock

SCENARIO_PATH = Path(__file__).resolve().parents[1] / "integration" / "islands.yaml"


@pytest.fixture
def scenario() -> Scenario:
    return Scenario.from_yaml(SCENARIO_PATH.read_text())


def test_from_yaml(scenario: Scenario):
    assert scenario.start == "experience1"
    assert scenario.config.vehicles == 3
    assert scenario.config.max_broadcast_steps == 1000
    assert len(scenario.network) == 4


def test_run_results(scenario: Scenario):
    results = scenario.run(clock=StepClock())

    assert results["start"] == "experience1"
    assert results["max_reachable_count"] == 3
    assert results["resources_planted"] == 5
    assert results["planted"] == [
        "experience1",
        "experience2",
        "experience4",
        "experience3",
        "experience5",
    ]
    visits = [e["node"] for e in results["broadcast"] if e["kind"] == "visit"]
    assert visits == [
        "experience1",
        "experience2",
        "experience3",
        "experience4",
        "experience5",
    ]
    assert results["broadcast_truncated"] is False
    # visits at t=0..4, priorities scored at t=5
    assert results["priorities"] == [
        {"node": "experience1", "priority": 5000},
        {"node": "experience2", "priority": 3200},
        {"node": "experience4", "priority": 2400},
        {"node": "experience3", "priority": 1500},
    ]
    json.dumps(results)


def test_run_from_other_start(scenario: Scenario):
    results = scenario.run(start="experience3", clock=StepClock())

    assert results["max_reachable_count"] == 2
    assert results["resources_planted"] == 2
    # islands the broadcast never reached keep infinite priority
    top = results["priorities"][0]
    assert top["priority"] == "inf"


def test_default_start_is_first_island():
    scenario = Scenario.from_yaml("islands:\n  X:\n  Y:\n")
    assert scenario.start == "X"
    assert scenario.run(clock=StepClock())["max_reachable_count"] == 1


def test_no_islands_and_no_start():
    scenario = Scenario.from_yaml("islands: {}\n")
    with pytest.raises(ValueError, match="no start island"):
        scenario.run(clock=StepClock())


def test_truncated_broadcast_reported():
    doc = """
settings:
  visit_interval: 0
  max_broadcast_steps: 4
islands:
  A:
    edges: [{target: B, travel_cost: 1}]
  B:
    edges: [{target: A, travel_cost: 1}]
"""
    results = Scenario.from_yaml(doc).run(clock=StepClock())
    assert results["broadcast_truncated"] is True
    assert len([e for e in results["broadcast"] if e["kind"] == "visit"]) == 4


def test_invalid_settings():
    with pytest.raises(jsonschema.ValidationError):
        Scenario.from_yaml("settings: {vehicles: 1, max_broadcast_steps: 0}\nislands: {}\n")
