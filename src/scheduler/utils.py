from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from simulation.elevator import Elevator

SAME_DIRECTION_BONUS = -50
OPPOSITE_DIRECTION_PENALTY = 1000


def approach_distance(elevator: "Elevator", floor: int) -> int:
    """Floors between the car and ``floor``.

    A car already heading toward the floor is charged only the forward
    delta.
    """

    current = elevator.current_floor
    if elevator.direction == "up" and floor > current:
        return floor - current
    if elevator.direction == "down" and floor < current:
        return current - floor
    return abs(current - floor)


def direction_score(elevator: "Elevator", request_direction: Optional[str]) -> float:
    if elevator.direction == "idle" or request_direction is None:
        return 0
    if elevator.direction == request_direction:
        return SAME_DIRECTION_BONUS
    return OPPOSITE_DIRECTION_PENALTY


def capacity_score(elevator: "Elevator") -> float:
    return (elevator.passengers / elevator.capacity) * 100
