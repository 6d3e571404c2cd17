"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import Settings, load_settings
from ..exceptions import InvalidConfigError

console = Console()

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


def parse_flag(option: str) -> tuple:
    """Split a ``name=value`` option; boolean words become bools."""
    name, sep, raw = option.partition("=")
    if not sep or not name:
        raise InvalidConfigError(option, option, "expected name=value")
    lower = raw.lower()
    if lower in _TRUE:
        return name, True
    if lower in _FALSE:
        return name, False
    return name, raw


def resolve_settings(
    config: Optional[Path] = None,
    flags: Optional[List[str]] = None,
) -> Settings:
    """Build settings from CLI options."""
    overrides = dict(parse_flag(option) for option in flags or [])
    return load_settings(config_file=config, **overrides)
