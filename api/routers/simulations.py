"""
Simulation endpoints.

POST /simulations/         → Run one policy over a workload
POST /simulations/compare  → Run every policy over the same workload

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Hand the workload to the engine
- Convert the result into a response

Each request builds its own policy instance and its own copy of the
processes, so concurrent requests never share scheduling state.

The handlers are plain `def`: a run is CPU-bound, so FastAPI executes it in
its threadpool instead of blocking the event loop.
"""

import logging

from fastapi import APIRouter, HTTPException

from api.schemas.simulation import CompareRequest, SimulationRequest, SimulationResponse
from scheduler.engine import SimulationError, compare_policies, run_simulation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("/", response_model=SimulationResponse)
def simulate(request: SimulationRequest) -> SimulationResponse:
    """Run a single scheduling policy and return its timeline and statistics."""
    try:
        result = run_simulation(
            request.policy,
            request.to_processes(),
            time_quantum=request.time_quantum,
        )
    except SimulationError as e:
        logger.error(f"Simulation failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return SimulationResponse.from_result(result)


@router.post("/compare", response_model=list[SimulationResponse])
def compare(request: CompareRequest) -> list[SimulationResponse]:
    """Run all four policies over the same workload, one response per policy."""
    try:
        results = compare_policies(request.to_processes(), time_quantum=request.time_quantum)
    except SimulationError as e:
        logger.error(f"Comparison failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return [SimulationResponse.from_result(result) for result in results]
