"""Configuration exceptions: settings files, flags and values."""

from typing import Any

from .base import EstreeMetricsError


class ConfigurationError(EstreeMetricsError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a settings flag or value is invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": str(key), "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
