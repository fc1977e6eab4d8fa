"""
PeakPerformance Backend — Health Check Routes
===============================================

What:  Liveness banner at `/` and a dependency-aware health check at `/health`.
Why:   Load balancers and uptime monitors need a cheap probe; operators need
       to know whether the database is reachable.
How:   `/health` runs `SELECT 1` through the application's Database.

Status levels:
    - healthy:   Database reachable
    - unhealthy: Database unreachable (reported in the body, HTTP 200)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from peakperformance import __version__
from peakperformance.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Server banner")
async def root() -> str:
    """Plain-text confirmation that the process is serving requests."""
    return "El servidor esta funcionando correctamente"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description=(
        "Returns the health status of the backend and its database. "
        "Used by Docker health checks and load balancers."
    ),
)
async def health_check(request: Request) -> HealthResponse:
    """
    Probe the database and report aggregate status.

    `Database.ping()` never raises; an unreachable database is reported as
    `disconnected` so the probe itself always answers.
    """
    database = request.app.state.database
    connected = await database.ping()
    if not connected:
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
