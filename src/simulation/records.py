from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .metrics import MetricsSummary


@dataclass
class MetricsRecord:
    """Historical summary of one simulation run."""

    scenario: str
    timestamp: str
    avg_wait_time: float
    avg_travel_time: float
    max_wait_time: float
    elevator_utilization: float
    requests_handled: int

    @classmethod
    def from_summary(
        cls, scenario: str, summary: MetricsSummary, timestamp: Optional[datetime] = None
    ) -> "MetricsRecord":
        timestamp = timestamp or datetime.now(timezone.utc)
        return cls(
            scenario=scenario,
            timestamp=timestamp.isoformat(),
            avg_wait_time=summary.average_wait,
            avg_travel_time=summary.average_travel,
            max_wait_time=summary.max_wait,
            elevator_utilization=summary.average_utilization,
            requests_handled=summary.requests_handled,
        )


class MetricsRecordStore:
    """Append-only JSON-lines file of ``MetricsRecord`` entries."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def append(self, record: MetricsRecord) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(record)) + "\n")

    def load(self) -> List[MetricsRecord]:
        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as handle:
            return [MetricsRecord(**json.loads(line)) for line in handle if line.strip()]
