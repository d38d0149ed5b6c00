from __future__ import annotations

from typing import Dict, Type

from .greedy import GreedyCostScheduler
from .interface import ScoreBreakdown, Scheduler

__all__ = [
    "GreedyCostScheduler",
    "ScoreBreakdown",
    "Scheduler",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[Scheduler]] = {
    "greedy_cost": GreedyCostScheduler,
}


def get_scheduler(name: str, **kwargs) -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls(**kwargs)
