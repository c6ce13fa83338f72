"""API route registration."""

from fastapi import FastAPI

from roster.api.routes import health, students, upload
from roster.config.models.observability import MetricsConfig
from roster.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI, metrics: MetricsConfig | None = None) -> None:
    """Register all routers with the application.

    Args:
        app: FastAPI application
        metrics: Metrics settings; the metrics endpoint is mounted when enabled
    """
    metrics = metrics or MetricsConfig()

    app.include_router(students.router, tags=["Students"])
    app.include_router(upload.router, tags=["Upload"])
    app.include_router(health.router, tags=["Health"])
    if metrics.enabled:
        app.add_api_route(metrics.path, health.get_metrics, methods=["GET"], tags=["Health"])

    logger.debug("routes_registered", metrics_enabled=metrics.enabled)
