from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Elevator:
    """A single car with a merged stop list and door handling."""

    elevator_id: int
    capacity: int = 8
    current_floor: int = 0
    destinations: List[int] = field(default_factory=list)
    direction: str = "idle"  # up, down, idle
    door_state: str = "closed"  # open, closed
    passengers: int = 0
    internal_requests: Dict[int, int] = field(default_factory=dict)

    @property
    def is_idle(self) -> bool:
        return self.direction == "idle"

    @property
    def available_capacity(self) -> int:
        return max(0, self.capacity - self.passengers)

    @property
    def next_stop(self) -> Optional[int]:
        return self.destinations[0] if self.destinations else None

    def add_destination(self, floor: int) -> None:
        self.destinations.append(floor)

    def add_alighting(self, floor: int, count: int) -> None:
        self.internal_requests[floor] = self.internal_requests.get(floor, 0) + count

    def recompute_path(self, lobby_floor: Optional[int] = None) -> None:
        """Rebuild ``destinations`` from raw stops and alighting floors.

        ``internal_requests`` is the source of truth for drop-offs; the stop
        list is derived from it and re-sorted in the current travel
        direction. When ``lobby_floor`` is given and nothing is pending, the
        car is sent there.
        """
        stops = set(self.destinations) | set(self.internal_requests)
        ordered = sorted(stops, reverse=self.direction != "up")
        if lobby_floor is not None and not ordered:
            ordered.append(lobby_floor)

        self.destinations = ordered
        if not ordered:
            self.direction = "idle"
        elif ordered[0] > self.current_floor:
            self.direction = "up"
        else:
            self.direction = "down"

    def move_one_floor(self) -> None:
        self.current_floor += 1 if self.direction == "up" else -1

    def alight(self) -> int:
        exiting = self.internal_requests.pop(self.current_floor, 0)
        self.passengers = max(0, self.passengers - exiting)
        return exiting

    def board(self, waiting: int) -> int:
        entering = min(waiting, self.available_capacity)
        self.passengers += entering
        return entering

    def open_doors(self) -> None:
        self.destinations = [f for f in self.destinations if f != self.current_floor]
        self.door_state = "open"

    def close_doors(self) -> None:
        self.door_state = "closed"

    @property
    def utilization(self) -> float:
        return self.passengers / self.capacity

    def snapshot(self) -> dict:
        return {
            "id": self.elevator_id,
            "currentFloor": self.current_floor,
            "destinations": list(self.destinations),
            "direction": self.direction,
            "doorState": self.door_state,
            "passengers": self.passengers,
            "capacity": self.capacity,
            "internalRequests": dict(self.internal_requests),
        }
