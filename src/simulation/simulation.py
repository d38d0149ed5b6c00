from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .building import Building
from .config import PeakConfig, SystemConfig
from .elevator import Elevator
from .events import DoorSchedule
from .metrics import MetricsAggregator, MetricsSummary
from .request import Request, RequestLedger
from .workload import GeneratedTrip, WorkloadGenerator

logger = logging.getLogger(__name__)


class ElevatorSystem:
    """Tick-driven elevator bank: request intake, dispatch and car movement.

    All mutable state (cars, floor queues, the request ledger and metrics)
    belongs to this object and is only changed through its public methods.
    Inputs are trusted; range checks are the caller's job.
    """

    def __init__(self, config: Optional[SystemConfig] = None, peak: Optional[PeakConfig] = None) -> None:
        self.config = config or SystemConfig()
        self.building = Building(
            num_floors=self.config.total_floors,
            elevator_count=self.config.elevator_count,
            capacity=self.config.capacity,
            scheduler_name=self.config.scheduler,
        )
        self.requests = RequestLedger()
        self.metrics = MetricsAggregator(window=self.config.metrics_window)
        self.doors = DoorSchedule()
        self.generator = WorkloadGenerator(
            total_floors=self.config.total_floors,
            request_frequency=self.config.request_frequency,
            max_cycles=self.config.generation_cycles,
            active=self.config.auto_generate,
            peak=peak,
            random_seed=self.config.random_seed,
        )
        self.current_tick: int = 0
        self.initialize_system()

    @property
    def elevators(self) -> List[Elevator]:
        return self.building.elevators

    @property
    def floors(self):
        return self.building.floors

    @property
    def peak(self) -> PeakConfig:
        return self.generator.peak

    def initialize_system(self) -> None:
        self.building.reset()
        self.requests.clear()
        self.metrics.reset()
        self.metrics.peak_mode = self.peak.active
        self.doors.clear()
        logger.info(
            "Initialized %d elevators over %d floors",
            self.config.elevator_count,
            self.config.total_floors,
        )

    def add_external_request(self, floor: int, direction: str, passengers: int) -> Request:
        self.floors.add_waiting(floor, direction, passengers)
        request = Request(
            type="external",
            floor=floor,
            direction=direction,
            passengers=passengers,
            timestamp=self.current_tick,
        )
        return self._intake(request)

    def add_internal_request(self, floor: int, passengers: int) -> Request:
        request = Request(
            type="internal",
            floor=floor,
            passengers=passengers,
            timestamp=self.current_tick,
        )
        return self._intake(request)

    def _intake(self, request: Request) -> Request:
        self.requests.append(request)
        self.building.dispatch(request, self.current_tick, self._lobby_floor())
        return request

    def _lobby_floor(self) -> Optional[int]:
        return self.peak.lobby_floor if self.peak.active else None

    def update_elevators(self) -> None:
        self.current_tick += 1
        for elevator_id in self.doors.pop_due(self.current_tick):
            self._close_doors(elevator_id)

        for elevator in self.elevators:
            if elevator.door_state == "open" or not elevator.destinations:
                continue
            if elevator.current_floor == elevator.next_stop:
                self._handle_arrival(elevator)
                continue
            elevator.move_one_floor()
            if elevator.current_floor == elevator.next_stop:
                self._handle_arrival(elevator)

    def generate_workload(self) -> Optional[GeneratedTrip]:
        trip = self.generator.cycle()
        if trip is not None:
            self.add_external_request(trip.floor, trip.direction, trip.passengers)
            self.add_internal_request(trip.destination, trip.passengers)
        return trip

    def step(self) -> None:
        self.generate_workload()
        self.update_elevators()

    def run(self, duration: int) -> None:
        for _ in range(duration):
            self.step()

    def _handle_arrival(self, elevator: Elevator) -> None:
        floor = elevator.current_floor

        exiting = elevator.alight()
        waiting = self.floors.waiting_for(floor, elevator.direction)
        entering = elevator.board(waiting)
        self.floors.board(floor, elevator.direction, entering)
        elevator.open_doors()
        logger.debug(
            "Elevator %d at floor %d: %d out, %d in, load %d/%d",
            elevator.elevator_id,
            floor,
            exiting,
            entering,
            elevator.passengers,
            elevator.capacity,
        )

        completed = self.requests.oldest_processing(elevator.elevator_id, floor)
        if completed is not None:
            completed.record_completion(self.current_tick)
            self.metrics.record(completed.wait_time, completed.travel_time, elevator.utilization)

        self.doors.schedule(self.current_tick + self.config.door_dwell_ticks, elevator.elevator_id)

    def _close_doors(self, elevator_id: int) -> None:
        elevator = self.building.get_elevator(elevator_id)
        if elevator is None:
            return
        elevator.close_doors()
        elevator.recompute_path(self._lobby_floor())

    def toggle_auto_generation(self) -> bool:
        return self.generator.toggle()

    def set_peak_scenario(
        self,
        active: Optional[bool] = None,
        lobby_floor: Optional[int] = None,
        request_percentage: Optional[float] = None,
        direction: Optional[str] = None,
    ) -> PeakConfig:
        changes = {
            key: value
            for key, value in (
                ("active", active),
                ("lobby_floor", lobby_floor),
                ("request_percentage", request_percentage),
                ("direction", direction),
            )
            if value is not None
        }
        self.generator.peak = self.peak.merged(**changes)
        self.metrics.peak_mode = self.peak.active
        logger.info("Peak scenario %s: %s", "on" if self.peak.active else "off", self.peak)

        if self.peak.active:
            lobby = self.peak.lobby_floor
            for elevator in self.elevators:
                if elevator.is_idle and lobby not in elevator.destinations:
                    elevator.add_destination(lobby)
                    elevator.recompute_path(lobby)
        return self.peak

    def get_system_status(self) -> Dict[str, object]:
        status = self.building.snapshot()
        status["metrics"] = self.metrics.snapshot()
        status["isAutoGenerating"] = self.generator.active
        return status

    def requests_snapshot(self) -> List[Dict[str, object]]:
        return self.requests.snapshot()

    def summary(self) -> MetricsSummary:
        return self.metrics.summary(self.current_tick)
