#!/usr/bin/env python3
"""
Domain Expiry Exporter

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import logging
import platform
import queue
import signal
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

from . import __version__
from .application.exceptions import ConfigLoadError, ConfigurationError, ServerStartError, ShutdownTimeoutError
from .application.use_cases import UpdateDomainMetrics
from .domain.exceptions import DateFormatError
from .infrastructure.adapters import YamlDomainConfigLoader, create_metrics
from .infrastructure.adapters.api import MetricsServer, create_app
from .infrastructure.config import Settings, load_settings
from .infrastructure.scheduler import RefreshScheduler

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence
    from types import FrameType

    from .application.ports import DomainConfigSource
    from .domain.entities import DomainConfig
    from .infrastructure.adapters import PrometheusExpirationMetrics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

_SERVER_EXITED = "server-exited"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self._metrics = create_metrics()

    @property
    def metrics(self) -> PrometheusExpirationMetrics:
        """Metrics adapter owning the process registry."""
        return self._metrics

    def create_config_source(self) -> DomainConfigSource:
        """Create the config file adapter."""
        return YamlDomainConfigLoader(self._settings.config_path)

    def create_update_use_case(self, config: DomainConfig) -> UpdateDomainMetrics:
        """Create the metrics update use case."""
        return UpdateDomainMetrics(config, self.metrics)

    def create_server(self, config: DomainConfig) -> MetricsServer:
        """Create the HTTP server exposing the registry."""
        app = create_app(
            self.metrics.registry,
            version=__version__,
            domain_count=len(config),
        )
        return MetricsServer(app, self._settings.address, log_level=self._settings.log_level)

    def create_scheduler(self, updater: UpdateDomainMetrics) -> RefreshScheduler | None:
        """Create the refresh scheduler, if a schedule is configured."""
        if not self._settings.refresh_enabled:
            return None
        return RefreshScheduler(updater, self._settings.refresh_schedule)


class Application:
    """
    Main application orchestrator.

    Loads the domain list, publishes the metrics once, then serves them
    until interrupted.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)
        self._events: queue.SimpleQueue[str] = queue.SimpleQueue()

    @property
    def container(self) -> ApplicationContainer:
        """Component container."""
        return self._container

    def request_stop(self, reason: str = "stop requested") -> None:
        """Wake the main loop and begin shutdown."""
        self._events.put(reason)

    def run(self) -> int:
        """
        Run the exporter until a termination signal arrives.

        Returns:
            Exit code (0 for graceful shutdown, 1 for failure).
        """
        try:
            config = self._container.create_config_source().load()
        except (ConfigLoadError, DateFormatError) as e:
            logger.error("Error loading config: %s", e)
            return 1

        logger.info(
            "domain-exporter started (version=%s, python=%s)",
            __version__,
            platform.python_version(),
        )

        updater = self._container.create_update_use_case(config)
        updater.execute()
        scheduler = self._container.create_scheduler(updater)

        server = self._container.create_server(config)
        with _stop_on_signals(self.request_stop):
            try:
                server.start(on_exit=lambda: self.request_stop(_SERVER_EXITED))
            except ServerStartError as e:
                logger.error("HTTP server error: %s", e)
                return 1
            logger.info("Prometheus exporter running on %s", server.address)

            if scheduler is not None:
                scheduler.start()

            reason = self._events.get()

        if scheduler is not None:
            scheduler.stop()

        if reason == _SERVER_EXITED:
            logger.error("HTTP server error: %s", server.error or "server stopped unexpectedly")
            return 1

        logger.info("Shutting down server...")
        try:
            server.stop()
        except ShutdownTimeoutError as e:
            logger.error("Server forced to shutdown: %s", e)
        else:
            logger.info("Server gracefully stopped")
        return 0


@contextmanager
def _stop_on_signals(callback: Callable[[str], None]) -> Iterator[None]:
    """Route SIGINT and SIGTERM to a stop callback while the block runs."""

    def handle(signum: int, frame: FrameType | None) -> None:  # noqa: ARG001
        callback(signal.Signals(signum).name)

    previous = {signum: signal.signal(signum, handle) for signum in (signal.SIGINT, signal.SIGTERM)}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    try:
        settings = load_settings(argv)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())

    try:
        exit_code = Application(settings).run()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        exit_code = 0
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        exit_code = 1
    except Exception:
        logger.exception("Unexpected error")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
