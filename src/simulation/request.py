from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

STATUS_ORDER = {"waiting": 0, "processing": 1, "completed": 2}


@dataclass
class Request:
    """A hall call (external) or car call (internal)."""

    type: str  # external, internal
    floor: int
    timestamp: int
    direction: Optional[str] = None
    passengers: Optional[int] = None
    elevator_id: Optional[int] = None
    status: str = "waiting"
    assigned_at: Optional[int] = None
    completed_at: Optional[int] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def _advance(self, status: str) -> None:
        if STATUS_ORDER[status] <= STATUS_ORDER[self.status]:
            raise ValueError(f"Request {self.id} cannot move from {self.status} to {status}")
        self.status = status

    def record_assignment(self, elevator_id: int, time_step: int) -> None:
        self._advance("processing")
        self.elevator_id = elevator_id
        self.assigned_at = time_step

    def record_completion(self, time_step: int) -> None:
        self._advance("completed")
        self.completed_at = time_step

    @property
    def wait_time(self) -> Optional[int]:
        if self.completed_at is None:
            return None
        return self.completed_at - self.timestamp

    @property
    def travel_time(self) -> Optional[int]:
        if self.completed_at is None or self.assigned_at is None:
            return None
        return self.completed_at - self.assigned_at

    def snapshot(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "id": self.id,
            "type": self.type,
            "floor": self.floor,
            "timestamp": self.timestamp,
            "status": self.status,
        }
        if self.direction is not None:
            data["direction"] = self.direction
        if self.elevator_id is not None:
            data["elevatorId"] = self.elevator_id
        if self.passengers is not None:
            data["passengers"] = self.passengers
        return data


class RequestLedger:
    """Append-only log of every request the system has seen."""

    def __init__(self) -> None:
        self._requests: List[Request] = []

    def __len__(self) -> int:
        return len(self._requests)

    def __iter__(self) -> Iterator[Request]:
        return iter(self._requests)

    def append(self, request: Request) -> Request:
        self._requests.append(request)
        return request

    def clear(self) -> None:
        self._requests = []

    def oldest_processing(self, elevator_id: int, floor: int) -> Optional[Request]:
        return next(
            (
                r
                for r in self._requests
                if r.status == "processing" and r.elevator_id == elevator_id and r.floor == floor
            ),
            None,
        )

    def with_status(self, status: str) -> List[Request]:
        return [r for r in self._requests if r.status == status]

    def snapshot(self) -> List[Dict[str, object]]:
        return [r.snapshot() for r in self._requests]
