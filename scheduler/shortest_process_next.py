"""
Shortest Process Next (SPN) policy — non-preemptive.

Whenever the processor is free, the arrived, unfinished process with the
smallest total_time_needed runs next. Once it starts, it keeps the
processor until it finishes, even if a shorter process arrives meanwhile.

There is no ready queue: on the ticks where a new choice is needed, the
whole process list is scanned. Ties go to the lowest index.

Downside: starvation — a long process might never run if short ones keep
arriving.
"""

from typing import Optional

from models.process import Process
from scheduler.base import AbstractPolicy, NO_PROCESS
from scheduler.ready_queue import best_candidate


class ShortestProcessNextPolicy(AbstractPolicy):

    def __init__(self):
        self._running: Optional[int] = NO_PROCESS

    def select(self, current_tick: int, processes: list[Process]) -> Optional[int]:
        if self._running is NO_PROCESS or processes[self._running].is_done:
            # None when nothing unfinished has arrived — never a stale finished index
            self._running = best_candidate(
                (
                    index
                    for index, process in enumerate(processes)
                    if process.start_time <= current_tick and not process.is_done
                ),
                metric=lambda index: processes[index].total_time_needed,
            )
        return self._running

    @property
    def policy_name(self) -> str:
        return "spn"
