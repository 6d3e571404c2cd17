"""Input tree exceptions: reading and recognising ESTree documents."""

from pathlib import Path
from typing import Optional

from .base import EstreeMetricsError


class TreeError(EstreeMetricsError):
    """Base class for errors about an input syntax tree."""

    pass


class TreeLoadError(TreeError):
    """Raised when a tree document cannot be read or decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Cannot load syntax tree: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class InvalidTreeError(TreeError):
    """Raised when a decoded document is not an ESTree node."""

    def __init__(self, reason: str, filepath: Optional[Path] = None):
        details = {"reason": reason}
        if filepath:
            details["filepath"] = str(filepath)

        super().__init__(f"Not a syntax tree: {reason}", details=details)
        self.reason = reason
        self.filepath = filepath
