"""Timestamp sources injected into the broadcast traversal."""

from __future__ import annotations

import time


def wall_clock_ms() -> float:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time() * 1000.0


class StepClock:
    """Deterministic clock advancing by a fixed step on every read.

    Usage:
        clock = StepClock(start=0.0, step=1.0)
        clock()  # 0.0
        clock()  # 1.0
    """

    def __init__(self, start: float = 0.0, step: float = 1.0) -> None:
        self.now = start
        self.step = step
        self.reads = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        self.reads += 1
        return value
