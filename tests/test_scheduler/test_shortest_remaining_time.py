"""
Tests for the Shortest Remaining Time policy.

SRT re-evaluates every tick: the ready process with the least remaining
work runs, so a short newcomer preempts a long-running process.
"""

from models.process import Process
from scheduler.shortest_remaining_time import ShortestRemainingTimePolicy


def _drive(policy, processes, ticks):
    decisions = []
    for tick in range(ticks):
        decision = policy.select(tick, processes)
        decisions.append(decision)
        if decision is not None:
            process = processes[decision]
            process.time_scheduled += 1
            process.is_done = process.time_scheduled == process.total_time_needed
    return decisions


def test_short_arrival_preempts():
    """A(0,5), B(2,2): B takes over at tick 2 (A has 3 left), A resumes at tick 4."""
    processes = [Process(0, 5, name="A"), Process(2, 2, name="B")]
    decisions = _drive(ShortestRemainingTimePolicy(), processes, 7)

    assert decisions == [0, 0, 1, 1, 0, 0, 0]


def test_longer_arrival_does_not_preempt():
    processes = [Process(0, 2), Process(1, 5)]
    decisions = _drive(ShortestRemainingTimePolicy(), processes, 7)

    assert decisions == [0, 0, 1, 1, 1, 1, 1]


def test_equal_remaining_keeps_lower_index_running():
    """At tick 1 both have 2 left; index 0 wins."""
    processes = [Process(0, 3), Process(1, 2)]
    decisions = _drive(ShortestRemainingTimePolicy(), processes, 5)

    assert decisions == [0, 0, 0, 1, 1]


def test_tie_break_uses_process_index_not_queue_position():
    """
    Index 1 is running with 2 left when index 0 arrives needing 2.
    Index 0 is behind in the queue but wins the tie on process index.
    """
    processes = [Process(2, 2), Process(0, 4)]
    decisions = _drive(ShortestRemainingTimePolicy(), processes, 6)

    assert decisions == [1, 1, 0, 0, 1, 1]


def test_idle_until_first_arrival_and_after_last_finish():
    processes = [Process(2, 1)]
    decisions = _drive(ShortestRemainingTimePolicy(), processes, 4)

    assert decisions == [None, None, 0, None]


def test_many_arrivals_run_in_remaining_time_order():
    processes = [Process(0, 3), Process(0, 1), Process(0, 2)]
    decisions = _drive(ShortestRemainingTimePolicy(), processes, 6)

    assert decisions == [1, 2, 2, 0, 0, 0]


def test_policy_name():
    assert ShortestRemainingTimePolicy().policy_name == "srt"
