"""
CLI entry point for running simulations.

Usage:
    python -m cli.run_simulation workloads/sample.json               # default policy
    python -m cli.run_simulation workload.json --policy srt          # single policy
    python -m cli.run_simulation workload.json --policy all          # compare all four
    python -m cli.run_simulation workload.json --policy round_robin --quantum 4
    python -m cli.run_simulation workload.json --base-url http://localhost:8000

Workload file format (same body the API accepts):
    {"processes": [{"name": "A", "start_time": 0, "total_time_needed": 4}, ...]}

Without --base-url the simulation runs in-process. With it, the workload is
sent to a running API server instead; the output is the same either way.
"""

import argparse
import json
import logging
import sys
from typing import Optional

import httpx
from pydantic import ValidationError

from api.schemas.simulation import SimulationResponse, Workload
from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.engine import SimulationError, compare_policies, run_simulation

logger = logging.getLogger(__name__)

POLICY_CHOICES = [p.value for p in SchedulingPolicy] + ["all"]


def run_local(workload: Workload, policy: str, quantum: Optional[int]) -> list[SimulationResponse]:
    processes = workload.to_processes()
    if policy == "all":
        results = compare_policies(processes, time_quantum=quantum)
    else:
        results = [run_simulation(policy, processes, time_quantum=quantum)]
    return [SimulationResponse.from_result(r) for r in results]


def run_remote(
    workload: Workload, policy: str, quantum: Optional[int], base_url: str
) -> list[SimulationResponse]:
    body = workload.model_dump()
    body["time_quantum"] = quantum
    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        if policy == "all":
            resp = client.post("/simulations/compare", json=body)
        else:
            resp = client.post("/simulations/", json={**body, "policy": policy})
        resp.raise_for_status()
        data = resp.json()
    if isinstance(data, dict):
        data = [data]
    return [SimulationResponse.model_validate(item) for item in data]


def format_timeline(response: SimulationResponse) -> str:
    """One entry per tick: the running process's name, or '-' for an idle tick."""
    names = {p.index: p.name for p in response.processes}
    return " ".join("-" if d is None else names[d] for d in response.timeline)


def print_summary(responses: list[SimulationResponse], show_timeline: bool) -> None:
    print("\n{:<12} {:>8} {:>12} {:>12} {:>10}".format(
        "Policy", "Ticks", "Avg wait", "Avg turn", "CPU %"
    ))
    print("-" * 58)
    for r in responses:
        print("{:<12} {:>8d} {:>12.2f} {:>12.2f} {:>9.1f}%".format(
            r.policy.value, r.total_ticks, r.avg_waiting_time,
            r.avg_turnaround_time, r.cpu_utilization,
        ))
    if show_timeline:
        print()
        for r in responses:
            print(f"{r.policy.value:<12} {format_timeline(r)}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="CPU scheduling policy simulator")
    parser.add_argument("workload", help="Path to a workload JSON file")
    parser.add_argument(
        "--policy", type=str, default=settings.DEFAULT_SCHEDULING_POLICY,
        choices=POLICY_CHOICES,
        help=f"Which policy to run (default: {settings.DEFAULT_SCHEDULING_POLICY})",
    )
    parser.add_argument(
        "--quantum", type=int, default=None,
        help=f"Round Robin time quantum in ticks (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument(
        "--base-url", type=str, default=None,
        help="Send the workload to a running API server instead of simulating locally",
    )
    parser.add_argument(
        "--timeline", action="store_true",
        help="Also print the per-tick decisions",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every tick decision",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.quantum is not None and args.quantum < 1:
        logger.error(f"--quantum must be >= 1, got {args.quantum}")
        return 1

    try:
        with open(args.workload, encoding="utf-8") as f:
            workload = Workload.model_validate_json(f.read())
    except OSError as e:
        logger.error(f"Cannot read workload file: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid workload file {args.workload}:\n{e}")
        return 1

    try:
        if args.base_url:
            responses = run_remote(workload, args.policy, args.quantum, args.base_url)
        else:
            responses = run_local(workload, args.policy, args.quantum)
    except SimulationError as e:
        logger.error(f"Simulation failed: {e}")
        return 1
    except httpx.HTTPError as e:
        logger.error(f"API request failed: {e}")
        return 1

    print(json.dumps([r.model_dump(mode="json") for r in responses], indent=2))
    print_summary(responses, args.timeline)
    return 0


if __name__ == "__main__":
    sys.exit(main())
