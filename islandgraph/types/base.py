"""Base aliases and constants for island traversal."""

from __future__ import annotations

import math
from enum import Enum
from typing import Hashable, Union

#: Numeric cost of an edge or path (travel time, activity time, ...).
Cost = Union[int, float]

#: Opaque island identifier; any hashable works.
NodeId = Hashable

#: ``last_visit`` value of an island that has never been visited.
NEVER_VISITED = -math.inf


class VisitKind(str, Enum):
    """Kinds of events recorded by the broadcast traversal."""

    VISIT = "visit"
    ENQUEUE = "enqueue"
