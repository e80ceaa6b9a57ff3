"""
Policy factory — maps policy names to policy classes.

One place that knows how to build a policy, instead of if/elif chains in
the engine, the API and the CLI. The mapping is fixed: the four policies
are the whole set.

Every call returns a NEW instance. Policies keep per-run state, so a run
must never share its policy with another run.
"""

from typing import Optional

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.base import AbstractPolicy
from scheduler.highest_response_ratio_next import HighestResponseRatioNextPolicy
from scheduler.round_robin import RoundRobinPolicy
from scheduler.shortest_process_next import ShortestProcessNextPolicy
from scheduler.shortest_remaining_time import ShortestRemainingTimePolicy


_POLICIES: dict[SchedulingPolicy, type[AbstractPolicy]] = {
    SchedulingPolicy.ROUND_ROBIN: RoundRobinPolicy,
    SchedulingPolicy.SPN: ShortestProcessNextPolicy,
    SchedulingPolicy.SRT: ShortestRemainingTimePolicy,
    SchedulingPolicy.HRRN: HighestResponseRatioNextPolicy,
}


def create_policy(
    policy: SchedulingPolicy | str, time_quantum: Optional[int] = None
) -> AbstractPolicy:
    """
    Create a fresh policy instance.

    For Round Robin, time_quantum defaults to settings.ROUND_ROBIN_TIME_QUANTUM:
        create_policy(SchedulingPolicy.ROUND_ROBIN, time_quantum=4)

    The other policies ignore time_quantum.
    """
    try:
        policy = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(
            f"Unknown scheduling policy: '{policy}'. "
            f"Available: {[p.value for p in SchedulingPolicy]}"
        ) from None

    cls = _POLICIES[policy]
    if policy == SchedulingPolicy.ROUND_ROBIN:
        if time_quantum is None:
            time_quantum = settings.ROUND_ROBIN_TIME_QUANTUM
        return cls(time_quantum=time_quantum)
    return cls()
