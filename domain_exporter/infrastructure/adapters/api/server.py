"""Uvicorn server running the metrics app on a background thread."""

from __future__ import annotations

import logging
import socket
import threading
from typing import TYPE_CHECKING

import uvicorn

from ....application.exceptions import ConfigurationError, ServerError, ServerStartError, ShutdownTimeoutError

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Grace period for in-flight requests once shutdown starts
SHUTDOWN_GRACE_SECONDS = 5.0
# Extra wait after forcing the server closed
FORCE_EXIT_SECONDS = 1.0


def parse_address(address: str) -> tuple[str, int]:
    """
    Split a bind address into host and port.

    Accepts ``:8080``, ``host:8080`` and ``[::1]:8080``. An empty host
    means all interfaces.

    Raises:
        ConfigurationError: If the address has no valid port.
    """
    host, sep, port_str = address.rpartition(":")
    if not sep:
        msg = f"invalid address {address!r}: missing port"
        raise ConfigurationError(msg)

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        msg = f"invalid address {address!r}: IPv6 hosts must be bracketed"
        raise ConfigurationError(msg)

    try:
        port = int(port_str)
    except ValueError:
        msg = f"invalid address {address!r}: port must be a number"
        raise ConfigurationError(msg) from None
    if not 0 <= port <= 65535:
        msg = f"invalid address {address!r}: port out of range"
        raise ConfigurationError(msg)

    return host, port


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Create a listening socket.

    An empty host listens on every interface, over both IPv4 and IPv6 where
    the platform supports dual-stack sockets.

    Raises:
        OSError: If the address cannot be bound.
    """
    if not host:
        if socket.has_dualstack_ipv6():
            return socket.create_server(("", port), family=socket.AF_INET6, dualstack_ipv6=True)
        return socket.create_server(("0.0.0.0", port))  # noqa: S104

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    return socket.create_server((host, port), family=family)


class MetricsServer:
    """
    Serves the metrics app with uvicorn on a background thread.

    The listening socket is bound on the calling thread so that bind
    failures surface from start() rather than from the server thread.
    """

    def __init__(
        self,
        app: FastAPI,
        address: str,
        *,
        log_level: str = "info",
        grace_period: float = SHUTDOWN_GRACE_SECONDS,
    ) -> None:
        """Initialize server for the given app and bind address."""
        self._address = address
        self._host, self._port = parse_address(address)
        self._grace_period = grace_period
        self._server = uvicorn.Server(
            uvicorn.Config(app, log_level=logging.getLevelName(log_level.upper())),
        )
        self._thread: threading.Thread | None = None
        self._error: BaseException | None = None

    @property
    def address(self) -> str:
        """Configured bind address."""
        return self._address

    @property
    def error(self) -> BaseException | None:
        """Error that stopped the server thread, if any."""
        return self._error

    @property
    def is_running(self) -> bool:
        """Check if the server thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self, on_exit: Callable[[], None] | None = None) -> None:
        """
        Bind the listening socket and start serving in the background.

        Args:
            on_exit: Called from the server thread when serving stops.

        Raises:
            ServerStartError: If the address cannot be bound.
        """
        try:
            sock = bind_socket(self._host, self._port)
        except OSError as e:
            msg = f"failed to listen on {self._address}: {e}"
            raise ServerStartError(msg) from e

        self._thread = threading.Thread(
            target=self._serve,
            args=(sock, on_exit),
            name="metrics-server",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """
        Stop the server, waiting up to the grace period for in-flight requests.

        Raises:
            ShutdownTimeoutError: If the server had to be forced closed.
        """
        if self._thread is None:
            return

        self._server.should_exit = True
        self._thread.join(self._grace_period)
        if not self._thread.is_alive():
            return

        self._server.force_exit = True
        self._thread.join(FORCE_EXIT_SECONDS)
        msg = f"server did not stop within {self._grace_period:g}s"
        raise ShutdownTimeoutError(msg)

    def _serve(self, sock: socket.socket, on_exit: Callable[[], None] | None) -> None:
        try:
            self._server.run(sockets=[sock])
        except SystemExit as e:
            # uvicorn exits the process on startup failures
            self._error = ServerError(f"server exited during startup (status {e.code})")
        except Exception as e:
            logger.exception("HTTP server error")
            self._error = e
        finally:
            sock.close()
            if on_exit is not None:
                on_exit()
