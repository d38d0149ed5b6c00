from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .config import PeakConfig

logger = logging.getLogger(__name__)


@dataclass
class GeneratedTrip:
    floor: int
    direction: str
    passengers: int
    destination: int


class WorkloadGenerator:
    """Synthetic hall calls with an optional rush-hour bias.

    Each call to ``cycle`` is one generation interval. After ``max_cycles``
    intervals the generator switches itself off until toggled back on.
    """

    def __init__(
        self,
        total_floors: int,
        request_frequency: float = 0.3,
        max_cycles: int = 100,
        active: bool = True,
        peak: Optional[PeakConfig] = None,
        random_seed: Optional[int] = None,
    ) -> None:
        self.total_floors = total_floors
        self.request_frequency = request_frequency
        self.max_cycles = max_cycles
        self.active = active
        self.peak = peak or PeakConfig()
        self.random = random.Random(random_seed)
        self.cycles = 0

    def toggle(self) -> bool:
        self.active = not self.active
        if self.active:
            self.cycles = 0
        logger.info("Auto generation %s", "resumed" if self.active else "paused")
        return self.active

    def cycle(self) -> Optional[GeneratedTrip]:
        if not self.active:
            return None
        if self.cycles >= self.max_cycles:
            self.active = False
            logger.info("Auto generation stopped after %d cycles", self.cycles)
            return None

        trip = None
        if self.random.random() < self.request_frequency:
            floor, direction, passengers = self._choose_origin()
            trip = GeneratedTrip(
                floor=floor,
                direction=direction,
                passengers=passengers,
                destination=self._choose_destination(floor, direction),
            )
        self.cycles += 1
        return trip

    def _choose_origin(self):
        if self.peak.active and self.random.random() < self.peak.request_percentage:
            return self.peak.lobby_floor, self.peak.direction, self.random.randint(2, 5)

        top = self.total_floors - 1
        floor = self.random.randrange(self.total_floors)
        if floor == 0:
            direction = "up"
        elif floor == top:
            direction = "down"
        else:
            direction = "up" if self.random.random() > 0.5 else "down"
        return floor, direction, self.random.randint(1, 3)

    def _choose_destination(self, origin: int, direction: str) -> int:
        if self.peak.active:
            return self.total_floors - 1 if direction == "up" else 0
        if direction == "up":
            return self.random.randint(origin + 1, self.total_floors - 1)
        return self.random.randint(0, origin - 1)
