"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms without changing the code
that uses them. The SimulationEngine only knows about AbstractPolicy —
it calls select() once per tick without caring whether it's Round Robin,
SRT, etc.

The contract, in one sentence:

    given (current_tick, processes) return the index of the process that
    occupies the processor during this tick, or NO_PROCESS.

Every policy instance carries private state (ready queue, quantum
countdown, "currently running" memory) that is only meaningful for ONE run
whose ticks arrive in order: 0, 1, 2, ... with no gaps and no repeats.
Build a fresh instance per run — never reuse one across runs.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.process import Process

# The idle decision: no process runs during this tick
NO_PROCESS = None


class AbstractPolicy(ABC):

    @abstractmethod
    def select(self, current_tick: int, processes: list[Process]) -> Optional[int]:
        """
        Decide which process runs during current_tick.

        Args:
            current_tick: the tick being simulated, strictly increasing across calls
            processes: every process in the run; read-only for the policy

        Returns:
            an index into processes, or NO_PROCESS if the processor stays idle
        """
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'round_robin', 'srt')."""
        ...
