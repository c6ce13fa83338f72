"""Health check and metrics endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from roster import __version__
from roster.api.dependencies import StudentStoreDep
from roster.api.models.health import ComponentHealth, HealthResponse
from roster.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(store: StudentStoreDep) -> JSONResponse:
    """Report service health.

    Returns 503 when the student store does not answer a ping.
    """
    start = time.time()
    healthy = await store.ping()
    latency_ms = (time.time() - start) * 1000

    component = ComponentHealth(
        name="student_store",
        status="healthy" if healthy else "unhealthy",
        latency_ms=latency_ms,
        message=None if healthy else "Store did not respond to ping",
    )
    response = HealthResponse(
        status=component.status,
        version=__version__,
        components=[component],
        timestamp=datetime.now(UTC),
    )

    logger.debug("health_check_completed", status=response.status)

    return JSONResponse(
        status_code=200 if healthy else 503,
        content=response.model_dump(mode="json"),
    )


async def get_metrics() -> Response:
    """Prometheus metrics in text exposition format."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
