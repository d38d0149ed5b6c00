"""CLI for running offline elevator-bank scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from simulation import ElevatorSystem, MetricsRecord, MetricsRecordStore, PeakConfig, SystemConfig


def build_simulation(config: Dict) -> ElevatorSystem:
    system_config = SystemConfig.from_dict(config.get("system", {}))
    peak_cfg = config.get("peak")
    peak = PeakConfig.from_dict(peak_cfg) if peak_cfg else None
    return ElevatorSystem(system_config, peak=peak)


def _apply_scheduled_events(system: ElevatorSystem, events: Iterable[Dict], current_time: int) -> None:
    for event in events:
        if event.get("time") != current_time:
            continue
        kind = event.get("type")
        if kind == "external":
            system.add_external_request(event["floor"], event["direction"], event.get("passengers", 1))
        elif kind == "internal":
            system.add_internal_request(event["floor"], event.get("passengers", 1))
        elif kind == "peak":
            system.set_peak_scenario(**event.get("config", {}))
        elif kind == "toggle_auto":
            system.toggle_auto_generation()


def run_simulation(system: ElevatorSystem, config: Dict) -> List[Dict]:
    duration = config.get("duration", 300)
    events = config.get("events", [])
    interval = max(1, config.get("metrics_hook_interval", 10))
    snapshots: List[Dict] = []

    for _ in range(duration):
        _apply_scheduled_events(system, events, system.current_tick)
        system.step()
        if system.current_tick % interval == 0:
            snapshots.append(asdict(system.summary()))
    return snapshots


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write metrics snapshots as JSON",
    )
    parser.add_argument(
        "--records",
        type=Path,
        help="Optional JSON-lines file to append the run's metrics record to",
    )
    parser.add_argument("--verbose", action="store_true", help="Log dispatch and arrival details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = json.loads(args.config.read_text())
    system = build_simulation(config)
    snapshots = run_simulation(system, config)

    scenario = config.get("name", args.config.stem)
    final_metrics = asdict(system.summary())
    results = {
        "scenario": scenario,
        "description": config.get("description"),
        "duration": config.get("duration", 300),
        "final_metrics": final_metrics,
        "metrics_over_time": snapshots,
    }

    save_results(args.output, results)
    if args.records:
        MetricsRecordStore(args.records).append(MetricsRecord.from_summary(scenario, system.summary()))

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Duration: {results['duration']} ticks")
    print("Final metrics:")
    for key, value in final_metrics.items():
        print(f"  {key}: {value}")
    if args.output:
        print(f"Saved metrics to {args.output}")


if __name__ == "__main__":
    main()
