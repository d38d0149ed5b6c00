from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from simulation.elevator import Elevator
    from simulation.request import Request


@dataclass(frozen=True)
class ScoreBreakdown:
    """Cost terms for one elevator against one request."""

    elevator_id: int
    distance: int
    direction_score: float
    capacity_score: float

    @property
    def total(self) -> float:
        return self.distance + self.direction_score + self.capacity_score


class Scheduler(Protocol):
    """Strategy interface for assigning a single request to a car."""

    def select(self, elevators: Sequence["Elevator"], request: "Request") -> Optional["Elevator"]:
        """
        Return the elevator that should serve ``request``.

        Returns None when no elevator is eligible, in which case the request
        stays waiting.
        """
        ...
