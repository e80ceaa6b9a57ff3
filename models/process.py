"""
Process record shared by the simulation driver and the scheduling policies.

Ownership rules:
- The driver (scheduler/engine.py) creates the list and is the ONLY writer
  of time_scheduled and is_done.
- Policies read everything and write nothing.
- start_time and total_time_needed never change during a run.

A process is identified by its position in the list, not by its name.
The name is a display label for reports.
"""

from dataclasses import dataclass


@dataclass
class Process:
    start_time: int           # arrival tick
    total_time_needed: int    # service ticks required
    name: str = ""
    time_scheduled: int = 0   # ticks granted so far
    is_done: bool = False

    def __post_init__(self):
        if self.start_time < 0:
            raise ValueError(f"start_time must be >= 0, got {self.start_time}")
        if self.total_time_needed < 0:
            raise ValueError(
                f"total_time_needed must be >= 0, got {self.total_time_needed}"
            )
        if not 0 <= self.time_scheduled <= self.total_time_needed:
            raise ValueError(
                f"time_scheduled must be within [0, {self.total_time_needed}], "
                f"got {self.time_scheduled}"
            )
        # A zero-length process is finished the moment it exists
        self.is_done = self.time_scheduled == self.total_time_needed

    @property
    def remaining_time(self) -> int:
        return self.total_time_needed - self.time_scheduled

    def __repr__(self) -> str:
        label = self.name or "Process"
        return (
            f"<{label} start={self.start_time} "
            f"{self.time_scheduled}/{self.total_time_needed}"
            f"{' done' if self.is_done else ''}>"
        )
