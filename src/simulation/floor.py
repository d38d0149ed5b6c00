from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class Floor:
    """Represents a floor with directional waiting counts."""

    number: int
    up_queue: int = 0
    down_queue: int = 0

    def has_waiting(self) -> bool:
        return bool(self.up_queue or self.down_queue)

    def snapshot(self) -> Dict[str, int]:
        return {"upQueue": self.up_queue, "downQueue": self.down_queue}


class FloorRegistry:
    """Sole owner of the per-floor waiting counters.

    Callers never touch ``Floor`` counters directly; they go through
    ``add_waiting``, ``waiting_for`` and ``board`` so that the counts can
    never drop below zero.
    """

    def __init__(self, num_floors: int) -> None:
        self.num_floors = num_floors
        self.floors: List[Floor] = []
        self.reset()

    def reset(self) -> None:
        self.floors = [Floor(i) for i in range(self.num_floors)]

    def __len__(self) -> int:
        return len(self.floors)

    def __getitem__(self, floor_number: int) -> Floor:
        return self.floors[floor_number]

    def add_waiting(self, floor_number: int, direction: str, count: int) -> None:
        floor = self.floors[floor_number]
        if direction == "up":
            floor.up_queue += count
        else:
            floor.down_queue += count

    def waiting_for(self, floor_number: int, direction: str) -> int:
        """Queue length a car travelling in ``direction`` would pick up from."""
        floor = self.floors[floor_number]
        if direction == "down":
            return floor.down_queue
        if direction == "up":
            return floor.up_queue
        return max(floor.up_queue, floor.down_queue)

    def board(self, floor_number: int, direction: str, count: int) -> None:
        floor = self.floors[floor_number]
        if direction == "down":
            floor.down_queue = max(0, floor.down_queue - count)
        elif direction == "up":
            floor.up_queue = max(0, floor.up_queue - count)
        # Idle pickup drains the down queue first, then falls back to up.
        elif floor.down_queue > 0:
            floor.down_queue = max(0, floor.down_queue - count)
        else:
            floor.up_queue = max(0, floor.up_queue - count)

    def snapshot(self) -> List[Dict[str, int]]:
        return [floor.snapshot() for floor in self.floors]
