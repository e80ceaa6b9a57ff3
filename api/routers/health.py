"""
Health check endpoint.

The simulator has no database or broker behind it, so "healthy" only means
the process is up and serving requests. Load balancers and container
orchestrators poll this before routing traffic.
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
