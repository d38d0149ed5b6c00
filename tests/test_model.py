import pytest

from simulation import DoorSchedule, Elevator, FloorRegistry, PeakConfig, Request, RequestLedger, SystemConfig


class TestElevatorPath:
    def test_merges_and_dedupes_stops(self):
        elevator = Elevator(0, current_floor=1, direction="up", destinations=[5, 3, 5])
        elevator.add_alighting(7, 2)
        elevator.add_alighting(3, 1)
        elevator.recompute_path()
        assert elevator.destinations == [3, 5, 7]
        assert elevator.direction == "up"

    def test_sorts_descending_unless_heading_up(self):
        elevator = Elevator(0, current_floor=9, destinations=[2, 6, 4])
        elevator.recompute_path()
        assert elevator.destinations == [6, 4, 2]
        assert elevator.direction == "down"

    def test_goes_idle_without_stops(self):
        elevator = Elevator(0, current_floor=4, direction="up")
        elevator.recompute_path()
        assert elevator.destinations == []
        assert elevator.direction == "idle"

    def test_lobby_injected_only_when_empty(self):
        empty = Elevator(0, current_floor=6)
        empty.recompute_path(lobby_floor=0)
        assert empty.destinations == [0]
        assert empty.direction == "down"

        busy = Elevator(1, current_floor=2, destinations=[8])
        busy.recompute_path(lobby_floor=0)
        assert busy.destinations == [8]
        assert busy.direction == "up"

    def test_stop_at_current_floor_reads_as_down(self):
        elevator = Elevator(0, current_floor=3, destinations=[3])
        elevator.recompute_path()
        assert elevator.direction == "down"


class TestElevatorLoad:
    def test_alight_floors_at_zero(self):
        elevator = Elevator(0, current_floor=4, passengers=1)
        elevator.add_alighting(4, 3)
        assert elevator.alight() == 3
        assert elevator.passengers == 0
        assert 4 not in elevator.internal_requests

    def test_board_respects_capacity(self):
        elevator = Elevator(0, capacity=8, passengers=6)
        assert elevator.board(5) == 2
        assert elevator.passengers == 8
        assert elevator.board(3) == 0

    def test_open_doors_clears_current_stop(self):
        elevator = Elevator(0, current_floor=5, destinations=[5, 8])
        elevator.open_doors()
        assert elevator.destinations == [8]
        assert elevator.door_state == "open"


class TestFloorRegistry:
    def test_directional_counts(self):
        floors = FloorRegistry(4)
        floors.add_waiting(2, "up", 3)
        floors.add_waiting(2, "down", 5)
        assert floors.waiting_for(2, "up") == 3
        assert floors.waiting_for(2, "down") == 5
        assert floors.waiting_for(2, "idle") == 5
        assert floors[2].has_waiting()
        assert not floors[1].has_waiting()

    def test_board_never_goes_negative(self):
        floors = FloorRegistry(3)
        floors.add_waiting(1, "up", 2)
        floors.board(1, "up", 5)
        assert floors[1].up_queue == 0

    def test_idle_pickup_drains_down_queue_first(self):
        floors = FloorRegistry(3)
        floors.add_waiting(1, "up", 4)
        floors.add_waiting(1, "down", 2)
        floors.board(1, "idle", 2)
        assert floors.snapshot()[1] == {"upQueue": 4, "downQueue": 0}
        floors.board(1, "idle", 3)
        assert floors.snapshot()[1] == {"upQueue": 1, "downQueue": 0}

    def test_reset(self):
        floors = FloorRegistry(2)
        floors.add_waiting(0, "up", 1)
        floors.reset()
        assert floors.snapshot() == [{"upQueue": 0, "downQueue": 0}] * 2


class TestRequestLedger:
    def test_status_only_moves_forward(self):
        request = Request(type="external", floor=3, direction="up", passengers=1, timestamp=2)
        request.record_assignment(elevator_id=1, time_step=2)
        request.record_completion(time_step=9)
        assert request.status == "completed"
        assert request.wait_time == 7
        assert request.travel_time == 7
        with pytest.raises(ValueError):
            request.record_assignment(elevator_id=0, time_step=10)

    def test_snapshot_omits_unset_fields(self):
        request = Request(type="internal", floor=4, timestamp=0)
        assert request.snapshot() == {
            "id": request.id,
            "type": "internal",
            "floor": 4,
            "timestamp": 0,
            "status": "waiting",
        }

    def test_oldest_processing_match(self):
        ledger = RequestLedger()
        first = ledger.append(Request(type="internal", floor=6, timestamp=0))
        second = ledger.append(Request(type="internal", floor=6, timestamp=1))
        other = ledger.append(Request(type="internal", floor=6, timestamp=1))
        for request in (first, second):
            request.record_assignment(0, 1)
        other.record_assignment(1, 1)

        assert ledger.oldest_processing(0, 6) is first
        assert ledger.oldest_processing(1, 6) is other
        assert ledger.oldest_processing(0, 2) is None
        assert len(ledger.with_status("processing")) == 3
        assert first.id != second.id


def test_door_schedule_fires_in_tick_order():
    doors = DoorSchedule()
    doors.schedule(8, elevator_id=2)
    doors.schedule(5, elevator_id=0)
    doors.schedule(5, elevator_id=1)
    assert doors.pop_due(4) == []
    assert doors.pop_due(6) == [0, 1]
    assert len(doors) == 1
    assert doors.pop_due(8) == [2]


class TestConfig:
    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError, match="floorz"):
            SystemConfig.from_dict({"floorz": 3})

    def test_peak_merge_keeps_unspecified_fields(self):
        peak = PeakConfig().merged(lobby_floor=3)
        assert peak.active is True
        peak = peak.merged(direction="down", active=False)
        assert (peak.active, peak.lobby_floor, peak.direction) == (False, 3, "down")

    def test_peak_direction_validated(self):
        with pytest.raises(ValueError):
            PeakConfig(direction="sideways")
