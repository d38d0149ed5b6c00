from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, List


@dataclass
class MetricsSummary:
    time_step: int
    average_wait: float
    wait_p95: float
    max_wait: float
    average_travel: float
    travel_p95: float
    average_utilization: float
    requests_handled: int


class MetricsAggregator:
    """Rolling windows of wait, travel and utilization samples."""

    def __init__(self, window: int = 100) -> None:
        self.window = window
        self.wait_times: Deque[float] = deque(maxlen=window)
        self.travel_times: Deque[float] = deque(maxlen=window)
        self.utilization: Deque[float] = deque(maxlen=window)
        self.peak_mode: bool = False
        self.requests_handled: int = 0

    def reset(self) -> None:
        self.wait_times.clear()
        self.travel_times.clear()
        self.utilization.clear()
        self.peak_mode = False
        self.requests_handled = 0

    def record(self, wait_time: float, travel_time: float, utilization: float) -> None:
        # deque(maxlen=...) evicts the oldest sample on overflow
        self.wait_times.append(wait_time)
        self.travel_times.append(travel_time)
        self.utilization.append(utilization)
        self.requests_handled += 1

    def _average(self, values: Iterable[float]) -> float:
        values = list(values)
        if not values:
            return 0.0
        return sum(values) / len(values)

    def _percentile(self, values: Iterable[float], percentile: float) -> float:
        sorted_vals: List[float] = sorted(values)
        if not sorted_vals:
            return 0.0
        k = (len(sorted_vals) - 1) * percentile
        f = math.floor(k)
        c = math.ceil(k)
        if f == c:
            return float(sorted_vals[int(k)])
        d0 = sorted_vals[int(f)] * (c - k)
        d1 = sorted_vals[int(c)] * (k - f)
        return float(d0 + d1)

    def summary(self, time_step: int) -> MetricsSummary:
        return MetricsSummary(
            time_step=time_step,
            average_wait=self._average(self.wait_times),
            wait_p95=self._percentile(self.wait_times, 0.95),
            max_wait=float(max(self.wait_times, default=0)),
            average_travel=self._average(self.travel_times),
            travel_p95=self._percentile(self.travel_times, 0.95),
            average_utilization=self._average(self.utilization),
            requests_handled=self.requests_handled,
        )

    def snapshot(self) -> Dict[str, object]:
        return {
            "waitTimes": list(self.wait_times),
            "travelTimes": list(self.travel_times),
            "elevatorUtilization": list(self.utilization),
            "peakMode": self.peak_mode,
        }
