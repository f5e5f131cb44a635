import time

from islandgraph.utils.clock import StepClock, wall_clock_ms


def test_step_clock_advances():
    clock = StepClock(start=5, step=2)
    assert [clock(), clock(), clock()] == [5, 7, 9]
    assert clock.reads == 3


def test_step_clock_frozen():
    clock = StepClock(step=0)
    assert clock() == clock() == 0


def test_wall_clock_is_milliseconds():
    before = time.time() * 1000.0
    now = wall_clock_ms()
    after = time.time() * 1000.0
    assert before <= now <= after
