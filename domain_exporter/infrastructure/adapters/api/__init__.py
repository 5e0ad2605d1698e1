"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import HealthResponse
from .server import MetricsServer, bind_socket, parse_address

__all__ = [
    "HealthResponse",
    "MetricsServer",
    "bind_socket",
    "create_app",
    "parse_address",
]
