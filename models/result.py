"""
Result types produced by a finished simulation run.

The policies never compute statistics — they only pick a process each tick.
Everything here is derived by the driver from the per-tick timeline and
the final state of the Process records:

    turnaround            = finish_time - start_time
    waiting               = turnaround - service_time
    normalized turnaround = turnaround / service_time

These are plain dataclasses so they stay independent of the HTTP layer;
api/schemas/simulation.py converts them into response models.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.enums import SchedulingPolicy


@dataclass
class RunSegment:
    """A maximal stretch of consecutive ticks with the same decision."""
    process_index: Optional[int]  # None = processor idle
    start: int                    # first tick of the segment
    end: int                      # one past the last tick

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass
class ProcessStats:
    index: int
    name: str
    start_time: int
    service_time: int
    finish_time: int

    @property
    def turnaround_time(self) -> int:
        return self.finish_time - self.start_time

    @property
    def waiting_time(self) -> int:
        return self.turnaround_time - self.service_time

    @property
    def normalized_turnaround(self) -> float:
        if self.service_time == 0:
            return 0.0
        return self.turnaround_time / self.service_time


@dataclass
class SimulationResult:
    policy: SchedulingPolicy
    time_quantum: Optional[int]
    timeline: list[Optional[int]] = field(default_factory=list)
    processes: list[ProcessStats] = field(default_factory=list)

    @property
    def total_ticks(self) -> int:
        return len(self.timeline)

    @property
    def idle_ticks(self) -> int:
        return sum(1 for decision in self.timeline if decision is None)

    @property
    def cpu_utilization(self) -> float:
        """Busy ticks as a percentage of all simulated ticks."""
        if not self.timeline:
            return 0.0
        return (self.total_ticks - self.idle_ticks) / self.total_ticks * 100

    @property
    def segments(self) -> list[RunSegment]:
        segments: list[RunSegment] = []
        for tick, decision in enumerate(self.timeline):
            if segments and segments[-1].process_index == decision:
                segments[-1].end = tick + 1
            else:
                segments.append(RunSegment(decision, tick, tick + 1))
        return segments

    def _average(self, values: list[float]) -> float:
        return sum(values) / len(values) if values else 0.0

    @property
    def avg_waiting_time(self) -> float:
        return self._average([p.waiting_time for p in self.processes])

    @property
    def avg_turnaround_time(self) -> float:
        return self._average([p.turnaround_time for p in self.processes])

    @property
    def avg_normalized_turnaround(self) -> float:
        return self._average([p.normalized_turnaround for p in self.processes])
