from simulation import PeakConfig, WorkloadGenerator


def test_uniform_trips_respect_building_edges():
    generator = WorkloadGenerator(total_floors=6, request_frequency=1.0, max_cycles=500, random_seed=5)
    for _ in range(500):
        trip = generator.cycle()
        assert 0 <= trip.floor < 6
        assert 1 <= trip.passengers <= 3
        if trip.floor == 0:
            assert trip.direction == "up"
        if trip.floor == 5:
            assert trip.direction == "down"
        if trip.direction == "up":
            assert trip.floor < trip.destination <= 5
        else:
            assert 0 <= trip.destination < trip.floor


def test_peak_trips_start_at_lobby_and_run_to_the_far_end():
    peak = PeakConfig(active=True, lobby_floor=0, request_percentage=1.0, direction="up")
    generator = WorkloadGenerator(total_floors=8, request_frequency=1.0, peak=peak, random_seed=2)
    trips = [generator.cycle() for _ in range(50)]
    assert {t.floor for t in trips} == {0}
    assert {t.direction for t in trips} == {"up"}
    assert {t.destination for t in trips} == {7}
    assert all(2 <= t.passengers <= 5 for t in trips)


def test_down_peak_routes_to_ground():
    peak = PeakConfig(active=True, lobby_floor=9, request_percentage=1.0, direction="down")
    generator = WorkloadGenerator(total_floors=10, request_frequency=1.0, peak=peak, random_seed=4)
    trip = generator.cycle()
    assert (trip.floor, trip.direction, trip.destination) == (9, "down", 0)


def test_zero_frequency_generates_nothing():
    generator = WorkloadGenerator(total_floors=5, request_frequency=0.0, random_seed=1)
    assert all(generator.cycle() is None for _ in range(20))
    assert generator.cycles == 20


def test_stops_after_max_cycles_and_resumes_on_toggle():
    generator = WorkloadGenerator(total_floors=5, request_frequency=1.0, max_cycles=3, random_seed=1)
    assert all(generator.cycle() is not None for _ in range(3))
    assert generator.active is True
    assert generator.cycle() is None
    assert generator.active is False

    assert generator.toggle() is True
    assert generator.cycles == 0
    assert generator.cycle() is not None


def test_seeded_generators_agree():
    first = WorkloadGenerator(total_floors=10, request_frequency=0.5, random_seed=42)
    second = WorkloadGenerator(total_floors=10, request_frequency=0.5, random_seed=42)
    assert [first.cycle() for _ in range(30)] == [second.cycle() for _ in range(30)]
