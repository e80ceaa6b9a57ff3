"""
Round Robin policy.

Each process gets a fixed time quantum (e.g., 2 ticks). If it finishes
within the quantum, the next process in line takes over immediately. If
not, it goes to the back of the ready queue and the next process runs.

Per tick:
    1. Arrivals join the back of the queue (ascending index order)
    2. If the quantum ran out, or the running process just finished,
       retire the front: back of the queue if unfinished, dropped if done.
       The countdown restarts at time_quantum.
    3. Front of the queue runs; countdown goes down by one
    4. Empty queue → idle tick, countdown forced to 0 so the next
       non-empty tick starts a fresh quantum

Data structure: ReadyQueue (deque)
- rotation = pop_front + push_back → O(1)

Tradeoff: the quantum controls fairness vs. churn:
- Small quantum (1 tick): very fair, a switch nearly every tick
- Large quantum: fewer switches, approaches FCFS behavior
"""

from typing import Optional

from models.process import Process
from scheduler.base import AbstractPolicy, NO_PROCESS
from scheduler.ready_queue import ReadyQueue


class RoundRobinPolicy(AbstractPolicy):

    def __init__(self, time_quantum: int = 1):
        if time_quantum < 1:
            raise ValueError(f"time_quantum must be >= 1, got {time_quantum}")
        self.time_quantum = time_quantum
        self._ready = ReadyQueue()
        self._ticks_left = time_quantum
        self._running: Optional[int] = NO_PROCESS  # decision of the previous tick

    def select(self, current_tick: int, processes: list[Process]) -> Optional[int]:
        self._ready.admit_arrivals(current_tick, processes)

        if self._ready and (self._ticks_left == 0 or self._ready.front_is_done(processes)):
            self._retire_front(processes)
            self._ticks_left = self.time_quantum

        if self._ready:
            self._running = self._ready.front()
            self._ticks_left -= 1
        else:
            self._running = NO_PROCESS
            self._ticks_left = 0

        return self._running

    def _retire_front(self, processes: list[Process]) -> None:
        """
        Take the front off the processor.

        After an idle tick the front is a process that arrived this tick and
        has not run yet, so there is nothing to rotate — it simply starts a
        fresh quantum.
        """
        if self._running is NO_PROCESS:
            return
        index = self._ready.pop_front()
        if not processes[index].is_done:
            self._ready.push_back(index)

    @property
    def policy_name(self) -> str:
        return "round_robin"
