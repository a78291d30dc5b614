# astar_state/domain/entities/waypoint.py
from __future__ import annotations

from dataclasses import dataclass

from astar_state.domain.entities.geography import Location


@dataclass(frozen=True)
class Waypoint:
    """
    One frontier node.
    previous_cost is the g-score from the start; remaining_cost is the heuristic
    estimate to the goal supplied by whoever builds the waypoint.
    """

    location: Location
    previous_cost: float
    remaining_cost: float = 0.0
    previous: Waypoint | None = None  # back-pointer for path rebuilding

    @property
    def total_cost(self) -> float:
        return self.previous_cost + self.remaining_cost
