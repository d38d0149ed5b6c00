import importlib.util
import json
from pathlib import Path

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def load_cli():
    spec = importlib.util.spec_from_file_location("run_scenario", SCRIPTS / "run_scenario.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_bundled_scenario_runs():
    cli = load_cli()
    config = json.loads((SCRIPTS / "scenarios" / "morning_rush.json").read_text())
    system = cli.build_simulation(config)
    assert system.peak.active is True

    snapshots = cli.run_simulation(system, config)

    assert len(snapshots) == config["duration"] // config["metrics_hook_interval"]
    assert system.peak.active is False
    assert system.metrics.requests_handled > 0


def test_scheduled_requests_are_applied():
    cli = load_cli()
    config = {
        "system": {"total_floors": 6, "elevator_count": 1, "auto_generate": False},
        "duration": 4,
        "metrics_hook_interval": 1,
        "events": [{"time": 0, "type": "external", "floor": 3, "direction": "up", "passengers": 2}],
    }
    system = cli.build_simulation(config)
    snapshots = cli.run_simulation(system, config)

    assert system.elevators[0].current_floor == 3
    assert system.elevators[0].passengers == 2
    assert snapshots[-1]["requests_handled"] == 1


def test_save_results(tmp_path):
    cli = load_cli()
    target = tmp_path / "out" / "results.json"
    cli.save_results(target, {"scenario": "x"})
    assert json.loads(target.read_text()) == {"scenario": "x"}
