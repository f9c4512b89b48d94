"""
Products API: Health Check Route
================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the connection pool with SELECT 1 and reports the result.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Request, Response

from app import __version__
from app.database import get_database
from app.schemas.product import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"model": HealthResponse, "description": "Database unreachable"}},
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """Probe database connectivity and report uptime."""
    database = get_database(request)
    connected = database is not None and await database.ping()

    if not connected:
        logger.warning("Health check: database unreachable")
        response.status_code = 503

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
