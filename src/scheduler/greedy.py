from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from .interface import ScoreBreakdown
from .utils import approach_distance, capacity_score, direction_score

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from simulation.elevator import Elevator
    from simulation.request import Request


class GreedyCostScheduler:
    """Picks the car with the lowest distance + direction + load cost."""

    def score(self, elevator: "Elevator", request: "Request") -> ScoreBreakdown:
        return ScoreBreakdown(
            elevator_id=elevator.elevator_id,
            distance=approach_distance(elevator, request.floor),
            direction_score=direction_score(elevator, request.direction),
            capacity_score=capacity_score(elevator),
        )

    def rank(self, elevators: Sequence["Elevator"], request: "Request") -> List[ScoreBreakdown]:
        return [self.score(elevator, request) for elevator in elevators]

    def select(self, elevators: Sequence["Elevator"], request: "Request") -> Optional["Elevator"]:
        best: Optional["Elevator"] = None
        best_score = 0.0
        # Strict comparison keeps the first car (lowest id) on ties.
        for elevator in sorted(elevators, key=lambda e: e.elevator_id):
            score = self.score(elevator, request).total
            if best is None or score < best_score:
                best, best_score = elevator, score
        return best
