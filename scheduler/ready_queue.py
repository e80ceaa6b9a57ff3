"""
Ready-queue bookkeeping shared by Round Robin, SRT and HRRN.

All three policies repeat the same two steps every tick before making
their own decision:

    1. Arrival ingestion — every process whose start_time == current_tick
       joins the back of the queue, in ascending index order. That order is
       what turns "two processes arrive on the same tick" into "the lower
       index arrived first".
    2. Retirement — a finished process at the front leaves the queue.

ReadyQueue implements those steps once. The policies only add what makes
them different (quantum rotation, remaining-time scan, ratio scan).

best_candidate() is the ONE comparator used for selection:
    primary key   = the policy's metric (minimised, or maximised with highest=True)
    secondary key = original process index, ascending
Position in the queue never matters for tie-breaking.

Data structure: collections.deque of process indices
- push_back / pop_front → O(1)
- promote (swap a member to the front) → O(n), n = ready processes
"""

from collections import deque
from typing import Callable, Iterable, Iterator, Optional

from models.process import Process


class ReadyQueue:

    def __init__(self):
        self._queue: deque[int] = deque()

    def admit_arrivals(self, current_tick: int, processes: list[Process]) -> list[int]:
        """
        Append every process arriving on this tick and return their indices.

        A process that is already done when it arrives (total_time_needed == 0)
        is never admitted — there is nothing to schedule.
        """
        arrived = [
            index
            for index, process in enumerate(processes)
            if process.start_time == current_tick and not process.is_done
        ]
        self._queue.extend(arrived)
        return arrived

    def front(self) -> Optional[int]:
        return self._queue[0] if self._queue else None

    def front_is_done(self, processes: list[Process]) -> bool:
        """True only if the queue is non-empty AND its front has finished."""
        return bool(self._queue) and processes[self._queue[0]].is_done

    def retire_front_if_done(self, processes: list[Process]) -> Optional[int]:
        """Drop a finished front. Returns the retired index, or None."""
        if self.front_is_done(processes):
            return self._queue.popleft()
        return None

    def pop_front(self) -> Optional[int]:
        return self._queue.popleft() if self._queue else None

    def push_back(self, index: int) -> None:
        self._queue.append(index)

    def promote(self, index: int) -> None:
        """Swap a member into position 0 (the old front takes its place)."""
        position = self._queue.index(index)
        self._queue[0], self._queue[position] = self._queue[position], self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[int]:
        return iter(self._queue)

    def __contains__(self, index: object) -> bool:
        return index in self._queue

    def __repr__(self) -> str:
        return f"ReadyQueue({list(self._queue)})"


def best_candidate(
    indices: Iterable[int],
    metric: Callable[[int], object],
    highest: bool = False,
) -> Optional[int]:
    """
    Pick the process index with the best metric; equal metrics go to the
    lower process index. Returns None for an empty input.

    metric must return something orderable that supports unary minus
    (int, float, Fraction) when highest=True.
    """
    candidates = list(indices)
    if not candidates:
        return None
    if highest:
        return min(candidates, key=lambda index: (-metric(index), index))
    return min(candidates, key=lambda index: (metric(index), index))
