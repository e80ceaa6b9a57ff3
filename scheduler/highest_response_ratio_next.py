"""
Highest Response Ratio Next (HRRN) policy — non-preemptive.

    response ratio = (waiting_time + total_time_needed) / total_time_needed
    waiting_time   = current_tick - start_time - time_scheduled

A process that has waited long relative to its size gets a high ratio, so
short processes are favoured without starving long ones: every tick spent
waiting pushes the ratio up.

The ratio is only consulted when the running process finishes. Until then
the front of the ready queue keeps the processor. Equal ratios go to the
lower process index.

Ratios are computed as exact fractions so that equal ratios compare equal
and the index tie-break applies.
"""

from fractions import Fraction
from typing import Optional

from models.process import Process
from scheduler.base import AbstractPolicy, NO_PROCESS
from scheduler.ready_queue import ReadyQueue, best_candidate


def waiting_time(process: Process, current_tick: int) -> int:
    return current_tick - process.start_time - process.time_scheduled


def response_ratio(process: Process, current_tick: int) -> Fraction:
    return Fraction(
        waiting_time(process, current_tick) + process.total_time_needed,
        process.total_time_needed,
    )


class HighestResponseRatioNextPolicy(AbstractPolicy):

    def __init__(self):
        self._ready = ReadyQueue()

    def select(self, current_tick: int, processes: list[Process]) -> Optional[int]:
        self._ready.admit_arrivals(current_tick, processes)

        if self._ready.retire_front_if_done(processes) is not None and self._ready:
            highest = best_candidate(
                self._ready,
                metric=lambda index: response_ratio(processes[index], current_tick),
                highest=True,
            )
            self._ready.promote(highest)

        if not self._ready:
            return NO_PROCESS
        return self._ready.front()

    @property
    def policy_name(self) -> str:
        return "hrrn"
