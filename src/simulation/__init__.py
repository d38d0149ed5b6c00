"""Simulation primitives for the elevator bank."""

from .building import Building
from .config import PeakConfig, SystemConfig
from .elevator import Elevator
from .events import DoorSchedule
from .floor import Floor, FloorRegistry
from .metrics import MetricsAggregator, MetricsSummary
from .records import MetricsRecord, MetricsRecordStore
from .request import Request, RequestLedger
from .simulation import ElevatorSystem
from .workload import GeneratedTrip, WorkloadGenerator

__all__ = [
    "Building",
    "DoorSchedule",
    "Elevator",
    "ElevatorSystem",
    "Floor",
    "FloorRegistry",
    "GeneratedTrip",
    "MetricsAggregator",
    "MetricsRecord",
    "MetricsRecordStore",
    "MetricsSummary",
    "PeakConfig",
    "Request",
    "RequestLedger",
    "SystemConfig",
    "WorkloadGenerator",
]
