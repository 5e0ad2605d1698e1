"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .models import HealthResponse

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from prometheus_client import CollectorRegistry

logger = logging.getLogger(__name__)


def create_app(
    registry: CollectorRegistry,
    version: str = "1.0.0",
    domain_count: int = 0,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        registry: Registry whose contents are served on /metrics.
        version: Application version string.
        domain_count: Number of configured domains, reported on /health.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="Domain Expiry Exporter",
        description="Prometheus exporter reporting the days left until each configured domain expires.",
        version=version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get(
        "/metrics",
        response_class=Response,
        tags=["Metrics"],
        summary="Prometheus metrics",
        description="Current metric values in the Prometheus text exposition format.",
    )
    def metrics() -> Response:
        return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
        description="Check if the service is healthy and running.",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=version,
            timestamp=datetime.now(UTC),
            domains=domain_count,
        )

    return app
