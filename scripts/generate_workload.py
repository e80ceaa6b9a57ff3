"""
Workload generator — writes a random workload JSON for demos and benchmarks.

Usage:
    python -m scripts.generate_workload --count 8 --seed 42 -o workload.json
    python -m scripts.generate_workload --count 20 --max-start 30 --max-need 10
    python -m scripts.generate_workload --count 8 --submit http://localhost:8000

The output is the same body the API and the CLI accept:
    {"processes": [{"name": "P0", "start_time": 0, "total_time_needed": 3}, ...]}

With --submit, the workload is also posted to /simulations/compare on a
running API server and the per-policy averages are printed.
"""

import argparse
import json
import random

import httpx


def generate(count: int, seed: int, max_start: int, max_need: int) -> dict:
    rng = random.Random(seed)
    processes = [
        {
            "name": f"P{i}",
            "start_time": rng.randint(0, max_start),
            "total_time_needed": rng.randint(1, max_need),
        }
        for i in range(count)
    ]
    # At least one process arrives at tick 0 so the run never opens idle
    processes[0]["start_time"] = 0
    return {"processes": processes}


def submit(workload: dict, base_url: str) -> None:
    client = httpx.Client(base_url=base_url, timeout=30.0)
    resp = client.post("/simulations/compare", json=workload)
    resp.raise_for_status()

    print(f"\nCompared policies at {base_url}:\n")
    for run in resp.json():
        print(f"  [{run['policy']}] avg wait {run['avg_waiting_time']:.2f}, "
              f"avg turnaround {run['avg_turnaround_time']:.2f}")


def main():
    parser = argparse.ArgumentParser(description="Generate a random scheduling workload")
    parser.add_argument("--count", type=int, default=5, help="Number of processes (default: 5)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    parser.add_argument("--max-start", type=int, default=10, help="Latest arrival tick (default: 10)")
    parser.add_argument("--max-need", type=int, default=8, help="Largest service time (default: 8)")
    parser.add_argument("-o", "--output", type=str, default=None, help="Write to file instead of stdout")
    parser.add_argument("--submit", type=str, default=None, metavar="BASE_URL",
                        help="Also post the workload to a running API server")
    args = parser.parse_args()

    if args.count < 1 or args.max_need < 1 or args.max_start < 0:
        parser.error("--count and --max-need must be >= 1, --max-start must be >= 0")

    workload = generate(args.count, args.seed, args.max_start, args.max_need)
    text = json.dumps(workload, indent=2)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Wrote {args.count} processes to {args.output}")
    else:
        print(text)

    if args.submit:
        submit(workload, args.submit)


if __name__ == "__main__":
    main()
