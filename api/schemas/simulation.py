"""
Pydantic schemas for the /simulations endpoints and the CLI workload file.

These are NOT the simulation's own types — they define the input/output
contract:
- ProcessSpec: one process as the user describes it
- SimulationRequest: run one policy over a workload (request body)
- CompareRequest: run every policy over a workload (request body)
- Workload: the JSON file format read by the CLI
- SimulationResponse: a finished run (response body)

Validation happens here, before any simulation code runs. If someone sends
total_time_needed=0 or time_quantum=0, FastAPI returns a 422 error.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import SchedulingPolicy
from models.process import Process
from models.result import SimulationResult


class ProcessSpec(BaseModel):
    """One process in a workload. Its position in the list is its identity."""

    name: Optional[str] = Field(default=None, max_length=64, examples=["A"])
    start_time: int = Field(..., ge=0, description="Arrival tick")
    total_time_needed: int = Field(..., ge=1, description="Service ticks required")


class Workload(BaseModel):
    """A list of processes — the body shared by every simulation request."""

    processes: list[ProcessSpec] = Field(..., min_length=1)

    def to_processes(self) -> list[Process]:
        return [
            Process(
                start_time=spec.start_time,
                total_time_needed=spec.total_time_needed,
                name=spec.name or f"P{index}",
            )
            for index, spec in enumerate(self.processes)
        ]


class CompareRequest(Workload):
    """Request body for POST /simulations/compare."""

    time_quantum: Optional[int] = Field(
        default=None,
        ge=1,
        description="Round Robin quantum in ticks (defaults to ROUND_ROBIN_TIME_QUANTUM)",
    )


class SimulationRequest(CompareRequest):
    """Request body for POST /simulations/."""

    policy: SchedulingPolicy  # must be one of: round_robin, spn, srt, hrrn


class SegmentResponse(BaseModel):
    process_index: Optional[int]  # null = idle
    start: int
    end: int


class ProcessStatsResponse(BaseModel):
    index: int
    name: str
    start_time: int
    service_time: int
    finish_time: int
    turnaround_time: int
    waiting_time: int
    normalized_turnaround: float


class SimulationResponse(BaseModel):
    """A finished run: the per-tick decisions plus derived statistics."""

    policy: SchedulingPolicy
    time_quantum: Optional[int] = None
    timeline: list[Optional[int]]
    segments: list[SegmentResponse]
    processes: list[ProcessStatsResponse]
    total_ticks: int
    idle_ticks: int
    cpu_utilization: float
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_normalized_turnaround: float

    @classmethod
    def from_result(cls, result: SimulationResult) -> "SimulationResponse":
        return cls(
            policy=result.policy,
            time_quantum=result.time_quantum,
            timeline=result.timeline,
            segments=[
                SegmentResponse(process_index=s.process_index, start=s.start, end=s.end)
                for s in result.segments
            ],
            processes=[
                ProcessStatsResponse(
                    index=p.index,
                    name=p.name,
                    start_time=p.start_time,
                    service_time=p.service_time,
                    finish_time=p.finish_time,
                    turnaround_time=p.turnaround_time,
                    waiting_time=p.waiting_time,
                    normalized_turnaround=round(p.normalized_turnaround, 4),
                )
                for p in result.processes
            ],
            total_ticks=result.total_ticks,
            idle_ticks=result.idle_ticks,
            cpu_utilization=round(result.cpu_utilization, 2),
            avg_waiting_time=round(result.avg_waiting_time, 4),
            avg_turnaround_time=round(result.avg_turnaround_time, 4),
            avg_normalized_turnaround=round(result.avg_normalized_turnaround, 4),
        )
