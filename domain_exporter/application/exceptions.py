"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class ConfigurationError(ApplicationError):
    """Raised when settings are invalid."""


class ConfigLoadError(ApplicationError):
    """Base exception for failures loading the domain config file."""


class ConfigReadError(ConfigLoadError):
    """Raised when the config file cannot be read."""


class ConfigParseError(ConfigLoadError):
    """Raised when the config file is not a well-formed domain list."""


class ServerError(ApplicationError):
    """Base exception for metrics server failures."""


class ServerStartError(ServerError):
    """Raised when the metrics server cannot bind its listening address."""


class ShutdownTimeoutError(ServerError):
    """Raised when the metrics server does not stop within the grace period."""
