"""Exception hierarchy for estree-metrics."""

from .base import EstreeMetricsError
from .config import ConfigurationError, InvalidConfigError
from .tree import InvalidTreeError, TreeError, TreeLoadError

__all__ = [
    "EstreeMetricsError",
    "ConfigurationError",
    "InvalidConfigError",
    "TreeError",
    "TreeLoadError",
    "InvalidTreeError",
]
