"""
Shortest Remaining Time (SRT) policy — preemptive.

Every tick, the ready process with the least remaining work
(total_time_needed - time_scheduled) runs. A newly arrived process that
needs less than what the running one has left takes over on its arrival
tick. Equal remaining times go to the lower process index.

The chosen process is kept at the front of the ready queue. Since only
the front ever runs, only the front can finish — so retiring a finished
front is enough to keep the queue free of done processes.
"""

from typing import Optional

from models.process import Process
from scheduler.base import AbstractPolicy, NO_PROCESS
from scheduler.ready_queue import ReadyQueue, best_candidate


class ShortestRemainingTimePolicy(AbstractPolicy):

    def __init__(self):
        self._ready = ReadyQueue()

    def select(self, current_tick: int, processes: list[Process]) -> Optional[int]:
        self._ready.admit_arrivals(current_tick, processes)
        self._ready.retire_front_if_done(processes)

        if not self._ready:
            return NO_PROCESS

        shortest = best_candidate(
            self._ready,
            metric=lambda index: processes[index].remaining_time,
        )
        self._ready.promote(shortest)
        return self._ready.front()

    @property
    def policy_name(self) -> str:
        return "srt"
