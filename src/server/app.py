from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Literal, Optional, Set, Union

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from simulation import ElevatorSystem, MetricsRecord, MetricsRecordStore, SystemConfig

logger = logging.getLogger(__name__)


class ConfigCommand(BaseModel):
    type: Literal["config"]
    floors: int = Field(ge=2)
    elevators: int = Field(ge=1)
    frequency: float = Field(ge=0.0, le=1.0)


class ExternalCommand(BaseModel):
    type: Literal["external"]
    floor: int = Field(ge=0)
    direction: Literal["up", "down"]
    passengers: int = Field(gt=0)


class InternalCommand(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["internal"]
    floor: int = Field(ge=0)
    passengers_out: int = Field(gt=0, alias="passengersOut")


class PeakSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    active: Optional[bool] = None
    lobby_floor: Optional[int] = Field(default=None, ge=0, alias="lobbyFloor")
    request_percentage: Optional[float] = Field(default=None, ge=0.0, le=1.0, alias="requestPercentage")
    direction: Optional[Literal["up", "down"]] = None


class SetPeakCommand(BaseModel):
    type: Literal["set-peak"]
    config: PeakSettings = Field(default_factory=PeakSettings)


class ToggleAutoCommand(BaseModel):
    type: Literal["toggle-auto"]


class ResetCommand(BaseModel):
    type: Literal["reset"]


Command = Annotated[
    Union[ConfigCommand, ExternalCommand, InternalCommand, SetPeakCommand, ToggleAutoCommand, ResetCommand],
    Field(discriminator="type"),
]
command_adapter: TypeAdapter = TypeAdapter(Command)


class RecordRequest(BaseModel):
    scenario: str = "live"


class CommandError(ValueError):
    """Raised when a well-formed command does not fit the running system."""


class SimulationManager:
    def __init__(
        self,
        num_floors: int = 10,
        elevator_count: int = 3,
        request_frequency: float = 1.0,
        tick_interval: float = 1.0,
        records_path: Path = Path("metrics_records.jsonl"),
    ) -> None:
        self.system = self._build_system(num_floors, elevator_count, request_frequency)
        self.tick_interval = tick_interval
        self.records = MetricsRecordStore(records_path)
        self.clients: Set[WebSocket] = set()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    @staticmethod
    def _build_system(num_floors: int, elevator_count: int, request_frequency: float) -> ElevatorSystem:
        return ElevatorSystem(
            SystemConfig(
                total_floors=num_floors,
                elevator_count=elevator_count,
                request_frequency=request_frequency,
            )
        )

    async def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    async def _run(self) -> None:
        while True:
            async with self._lock:
                self.system.step()
                payload = self.current_state()
            await self.broadcast(payload)
            await asyncio.sleep(self.tick_interval)

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        logger.info("Viewer connected (%d total)", len(self.clients))
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
            logger.info("Viewer disconnected (%d total)", len(self.clients))
        with contextlib.suppress(Exception):
            await websocket.close()

    def current_state(self) -> dict:
        state = self.system.get_system_status()
        state["requests"] = self.system.requests_snapshot()
        state["tick"] = self.system.current_tick
        return state

    async def handle_message(self, text: str) -> dict:
        try:
            command = command_adapter.validate_python(json.loads(text))
            async with self._lock:
                self.apply(command)
                return self.current_state()
        except json.JSONDecodeError as exc:
            detail = f"Malformed JSON: {exc.msg}"
        except ValidationError as exc:
            detail = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
        except CommandError as exc:
            detail = str(exc)
        logger.warning("Rejected command: %s", detail)
        return {"type": "error", "detail": detail}

    def apply(self, command: BaseModel) -> None:
        if isinstance(command, ConfigCommand):
            self.system = self._build_system(command.floors, command.elevators, command.frequency)
        elif isinstance(command, ExternalCommand):
            self._check_floor(command.floor)
            self.system.add_external_request(command.floor, command.direction, command.passengers)
        elif isinstance(command, InternalCommand):
            self._check_floor(command.floor)
            self.system.add_internal_request(command.floor, command.passengers_out)
        elif isinstance(command, ToggleAutoCommand):
            self.system.toggle_auto_generation()
        elif isinstance(command, SetPeakCommand):
            if command.config.lobby_floor is not None:
                self._check_floor(command.config.lobby_floor)
            self.system.set_peak_scenario(**command.config.model_dump())
        elif isinstance(command, ResetCommand):
            self.system.initialize_system()

    def _check_floor(self, floor: int) -> None:
        total = self.system.config.total_floors
        if not 0 <= floor < total:
            raise CommandError(f"Floor {floor} is outside 0..{total - 1}")

    async def save_record(self, scenario: str) -> dict:
        async with self._lock:
            record = MetricsRecord.from_summary(scenario, self.system.summary())
        self.records.append(record)
        return asdict(record)


def create_app(manager: SimulationManager) -> FastAPI:
    app = FastAPI(title="Elevator Bank Simulation API")
    app.state.manager = manager
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        await manager.start()

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await manager.stop()

    @app.get("/state")
    async def get_state() -> dict:
        return manager.current_state()

    @app.post("/metrics/records")
    async def save_record(request: RecordRequest) -> dict:
        return await manager.save_record(request.scenario)

    @app.websocket("/ws/stream")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await manager.register(websocket)
        try:
            while True:
                text = await websocket.receive_text()
                await websocket.send_text(json.dumps(await manager.handle_message(text)))
        except WebSocketDisconnect:
            await manager.unregister(websocket)

    return app


manager = SimulationManager()
app = create_app(manager)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("server.app:app", host="0.0.0.0", port=3001, reload=False)
