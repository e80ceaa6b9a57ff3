"""
Simulation engine — the tick-by-tick driver.

The engine owns the clock and the Process records. Every tick it executes:

    1. Ask the policy: which process runs during this tick?
    2. Check the answer (must be None or an unfinished, in-range index)
    3. Apply it: time_scheduled += 1, mark done on the last needed tick
    4. Record the decision, advance the clock

The policy only DECIDES; the engine is the only thing that changes a
Process. Idle ticks (decision None) still move the clock forward.

           Engine                    Policy
    ┌──────────────────┐  select  ┌──────────────────┐
    │ clock, processes │─────────>│ RR / SPN / SRT / │
    │ timeline         │<─────────│ HRRN (own state) │
    └──────────────────┘  index   └──────────────────┘

Calls always arrive in order 0, 1, 2, ... with no gaps, starting at tick 0,
which is at or before every arrival because start times are non-negative.
"""

import copy
import logging
from typing import Optional

from config.settings import settings
from models.enums import SchedulingPolicy
from models.process import Process
from models.result import ProcessStats, SimulationResult
from scheduler.base import AbstractPolicy, NO_PROCESS
from scheduler.factory import create_policy

logger = logging.getLogger(__name__)


class SimulationError(RuntimeError):
    """A run could not be completed."""


class PolicyContractError(SimulationError):
    """A policy returned a decision the engine cannot apply."""


class SimulationEngine:
    """
    Runs ONE simulation: one policy instance, one list of processes.

    The processes are mutated in place. Use run_simulation() if the caller's
    records must stay untouched.
    """

    def __init__(
        self,
        policy: AbstractPolicy,
        processes: list[Process],
        max_ticks: Optional[int] = None,
    ):
        self._policy = policy
        self._processes = processes
        self._max_ticks = settings.MAX_SIMULATION_TICKS if max_ticks is None else max_ticks
        self._finish_times: dict[int, int] = {}
        self._timeline: list[Optional[int]] = []
        self._ran = False

    def run(self) -> SimulationResult:
        if self._ran:
            raise SimulationError("SimulationEngine.run() can only be called once")
        self._ran = True

        logger.info(
            f"Simulation started: policy={self._policy.policy_name}, "
            f"processes={len(self._processes)}"
        )

        # Zero-length processes are finished on arrival
        for index, process in enumerate(self._processes):
            if process.is_done:
                self._finish_times[index] = process.start_time

        tick = 0
        while not self._all_done():
            if tick >= self._max_ticks:
                raise SimulationError(
                    f"Simulation exceeded {self._max_ticks} ticks with "
                    f"{self._unfinished_count()} processes unfinished"
                )
            decision = self._policy.select(tick, self._processes)
            self._apply(tick, decision)
            self._timeline.append(decision)
            tick += 1

        result = self._build_result()
        logger.info(
            f"Simulation finished: policy={self._policy.policy_name}, "
            f"ticks={result.total_ticks}, idle={result.idle_ticks}, "
            f"avg_waiting={result.avg_waiting_time:.2f}"
        )
        return result

    def _apply(self, tick: int, decision: Optional[int]) -> None:
        if decision is NO_PROCESS:
            logger.debug(f"[t={tick}] idle")
            return

        if not isinstance(decision, int) or not 0 <= decision < len(self._processes):
            logger.warning(f"[t={tick}] {self._policy.policy_name} returned invalid index {decision!r}")
            raise PolicyContractError(
                f"{self._policy.policy_name} returned index {decision!r} at tick {tick}; "
                f"expected None or 0..{len(self._processes) - 1}"
            )

        process = self._processes[decision]
        if process.is_done:
            logger.warning(f"[t={tick}] {self._policy.policy_name} picked finished process {decision}")
            raise PolicyContractError(
                f"{self._policy.policy_name} picked finished process {decision} at tick {tick}"
            )
        if process.start_time > tick:
            logger.warning(f"[t={tick}] {self._policy.policy_name} picked process {decision} before arrival")
            raise PolicyContractError(
                f"{self._policy.policy_name} picked process {decision} at tick {tick}, "
                f"before its start_time {process.start_time}"
            )

        process.time_scheduled += 1
        if process.time_scheduled == process.total_time_needed:
            process.is_done = True
            self._finish_times[decision] = tick + 1
            logger.debug(f"[t={tick}] process {decision} ran and finished")
        else:
            logger.debug(f"[t={tick}] process {decision} ran ({process.remaining_time} left)")

    def _all_done(self) -> bool:
        return all(process.is_done for process in self._processes)

    def _unfinished_count(self) -> int:
        return sum(1 for process in self._processes if not process.is_done)

    def _build_result(self) -> SimulationResult:
        return SimulationResult(
            policy=SchedulingPolicy(self._policy.policy_name),
            time_quantum=getattr(self._policy, "time_quantum", None),
            timeline=list(self._timeline),
            processes=[
                ProcessStats(
                    index=index,
                    name=process.name or f"P{index}",
                    start_time=process.start_time,
                    service_time=process.total_time_needed,
                    finish_time=self._finish_times[index],
                )
                for index, process in enumerate(self._processes)
            ],
        )


def run_simulation(
    policy: SchedulingPolicy | str,
    processes: list[Process],
    time_quantum: Optional[int] = None,
    max_ticks: Optional[int] = None,
) -> SimulationResult:
    """
    Run one policy over a private copy of the processes.

    The caller's Process records are left untouched, so the same list can be
    fed to several runs.
    """
    engine = SimulationEngine(
        create_policy(policy, time_quantum=time_quantum),
        copy.deepcopy(processes),
        max_ticks=max_ticks,
    )
    return engine.run()


def compare_policies(
    processes: list[Process],
    time_quantum: Optional[int] = None,
    max_ticks: Optional[int] = None,
) -> list[SimulationResult]:
    """Run every policy over the same workload, in SchedulingPolicy order."""
    return [
        run_simulation(policy, processes, time_quantum=time_quantum, max_ticks=max_ticks)
        for policy in SchedulingPolicy
    ]
