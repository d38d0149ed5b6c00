from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Dict, Optional

DIRECTIONS = ("up", "down")


def _known_fields(cls, data: Dict) -> Dict:
    names = {f.name for f in fields(cls)}
    unknown = set(data) - names
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} keys: {', '.join(sorted(unknown))}")
    return dict(data)


@dataclass
class SystemConfig:
    """Building and fleet parameters for an elevator bank."""

    total_floors: int = 10
    elevator_count: int = 4
    request_frequency: float = 0.3
    capacity: int = 8
    door_dwell_ticks: int = 3
    metrics_window: int = 100
    generation_cycles: int = 100
    auto_generate: bool = True
    random_seed: Optional[int] = None
    scheduler: str = "greedy_cost"

    @classmethod
    def from_dict(cls, data: Dict) -> "SystemConfig":
        return cls(**_known_fields(cls, data))


@dataclass(frozen=True)
class PeakConfig:
    """Rush-hour bias toward one lobby floor and direction."""

    active: bool = False
    lobby_floor: int = 0
    request_percentage: float = 0.7
    direction: str = "up"

    def __post_init__(self) -> None:
        if self.direction not in DIRECTIONS:
            raise ValueError(f"Peak direction must be one of {DIRECTIONS}, got '{self.direction}'")

    def merged(self, **changes) -> "PeakConfig":
        """Return a copy with ``changes`` applied; ``active`` defaults to True."""
        changes.setdefault("active", True)
        return replace(self, **_known_fields(PeakConfig, changes))

    @classmethod
    def from_dict(cls, data: Dict) -> "PeakConfig":
        return cls(**_known_fields(cls, data))
