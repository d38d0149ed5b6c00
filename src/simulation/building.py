from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .elevator import Elevator
from .floor import FloorRegistry
from .request import Request
from scheduler import Scheduler, get_scheduler

logger = logging.getLogger(__name__)


@dataclass
class Building:
    """Container for floors and elevators with greedy dispatch."""

    num_floors: int
    elevator_count: int
    capacity: int = 8
    scheduler_name: str = "greedy_cost"
    scheduler: Scheduler = field(init=False)
    floors: FloorRegistry = field(init=False)
    elevators: List[Elevator] = field(init=False)

    def __post_init__(self) -> None:
        self.scheduler = get_scheduler(self.scheduler_name)
        self.floors = FloorRegistry(self.num_floors)
        self.elevators = []
        self.reset()

    def reset(self) -> None:
        self.floors.reset()
        self.elevators = [Elevator(i, capacity=self.capacity) for i in range(self.elevator_count)]

    def dispatch(self, request: Request, current_time: int, lobby_floor: Optional[int] = None) -> Optional[Elevator]:
        elevator = self.scheduler.select(self.elevators, request)
        if elevator is None:
            logger.debug("No elevator available for request %s at floor %d", request.id, request.floor)
            return None

        elevator.add_destination(request.floor)
        if request.type == "internal":
            elevator.add_alighting(request.floor, request.passengers or 1)
        elevator.recompute_path(lobby_floor)
        request.record_assignment(elevator.elevator_id, current_time)
        logger.debug(
            "Assigned %s request %s (floor %d) to elevator %d",
            request.type,
            request.id,
            request.floor,
            elevator.elevator_id,
        )
        return elevator

    def get_elevator(self, elevator_id: int) -> Optional[Elevator]:
        for elevator in self.elevators:
            if elevator.elevator_id == elevator_id:
                return elevator
        return None

    def snapshot(self) -> dict:
        return {
            "elevators": [elevator.snapshot() for elevator in self.elevators],
            "floors": self.floors.snapshot(),
        }
