"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup/shutdown logging
3. Registers all routers (simulations, health)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from api.routers import health, simulations

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """No external connections to open — startup and shutdown are just logged."""
    logger.info(
        f"API ready — default policy: {settings.DEFAULT_SCHEDULING_POLICY}, "
        f"round robin quantum: {settings.ROUND_ROBIN_TIME_QUANTUM}"
    )
    yield
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="CPU Scheduling Simulator",
        description="Tick-driven simulation of Round Robin, SPN, SRT and HRRN scheduling policies",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(simulations.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
