from __future__ import annotations

import heapq
from itertools import count
from typing import List, Tuple


class DoorSchedule:
    """Priority queue of pending door-close events keyed by tick.

    Events that share a fire tick pop in the order they were scheduled.
    """

    def __init__(self) -> None:
        self._events: List[Tuple[int, int, int]] = []
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._events)

    def schedule(self, fire_tick: int, elevator_id: int) -> None:
        heapq.heappush(self._events, (fire_tick, next(self._sequence), elevator_id))

    def pop_due(self, current_tick: int) -> List[int]:
        due: List[int] = []
        while self._events and self._events[0][0] <= current_tick:
            _, _, elevator_id = heapq.heappop(self._events)
            due.append(elevator_id)
        return due

    def clear(self) -> None:
        self._events = []
