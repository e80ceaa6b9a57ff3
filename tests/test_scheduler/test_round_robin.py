"""
Tests for the Round Robin policy.

Each test drives the policy tick by tick, applying every decision to the
processes exactly like the engine does, and checks the sequence of
decisions (None = idle tick).
"""

import pytest

from models.process import Process
from scheduler.round_robin import RoundRobinPolicy


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


def test_two_processes_quantum_two():
    """A(0,4), B(0,2), q=2 → A A B B A A, then idle."""
    processes = [Process(0, 4, name="A"), Process(0, 2, name="B")]
    decisions = _drive(RoundRobinPolicy(time_quantum=2), processes, 7)

    assert decisions == [0, 0, 1, 1, 0, 0, None]
    assert all(p.is_done for p in processes)


def test_preempts_exactly_every_quantum():
    processes = [Process(0, 10), Process(0, 10)]
    decisions = _drive(RoundRobinPolicy(time_quantum=3), processes, 12)

    assert decisions == [0, 0, 0, 1, 1, 1, 0, 0, 0, 1, 1, 1]


def test_quantum_of_one_alternates():
    processes = [Process(0, 3), Process(0, 3), Process(0, 3)]
    decisions = _drive(RoundRobinPolicy(time_quantum=1), processes, 9)

    assert decisions == [0, 1, 2, 0, 1, 2, 0, 1, 2]


def test_finishing_early_hands_over_immediately():
    """A finishes after 1 tick of a 3-tick quantum; B starts on the next tick."""
    processes = [Process(0, 1), Process(0, 3)]
    decisions = _drive(RoundRobinPolicy(time_quantum=3), processes, 4)

    assert decisions == [0, 1, 1, 1]


def test_late_arrival_joins_back_of_queue():
    processes = [Process(0, 4), Process(1, 1)]
    decisions = _drive(RoundRobinPolicy(time_quantum=2), processes, 6)

    assert decisions == [0, 0, 1, 0, 0, None]


def test_idle_until_first_arrival():
    processes = [Process(2, 1)]
    decisions = _drive(RoundRobinPolicy(time_quantum=2), processes, 4)

    assert decisions == [None, None, 0, None]


def test_simultaneous_arrival_after_idle_keeps_index_order():
    """Processes arriving together on a non-zero tick run lowest index first."""
    processes = [Process(1, 2), Process(1, 2)]
    decisions = _drive(RoundRobinPolicy(time_quantum=2), processes, 5)

    assert decisions == [None, 0, 0, 1, 1]


def test_gap_between_arrivals():
    processes = [Process(0, 1), Process(3, 2)]
    decisions = _drive(RoundRobinPolicy(time_quantum=4), processes, 6)

    assert decisions == [0, None, None, 1, 1, None]


def test_empty_process_list_is_idle():
    assert _drive(RoundRobinPolicy(time_quantum=2), [], 3) == [None, None, None]


def test_select_does_not_modify_processes():
    processes = [Process(0, 4), Process(0, 2)]
    policy = RoundRobinPolicy(time_quantum=2)

    policy.select(0, processes)
    policy.select(1, processes)

    assert [p.time_scheduled for p in processes] == [0, 0]
    assert not any(p.is_done for p in processes)


def test_invalid_quantum_rejected():
    with pytest.raises(ValueError):
        RoundRobinPolicy(time_quantum=0)


def test_time_quantum_is_configurable():
    assert RoundRobinPolicy(time_quantum=10).time_quantum == 10


def test_policy_name():
    assert RoundRobinPolicy().policy_name == "round_robin"
