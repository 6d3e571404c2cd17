"""Settings loading for estree-metrics.

Settings are a flat set of feature flags read by syntax specifications,
e.g. whether `||` or `for...in` count as branches. Sources are merged in
priority order:
    1. Defaults (DEFAULT_FLAGS)
    2. Project config (./estree-metrics.toml, [settings] table)
    3. Explicit config file
    4. Environment variables (ESTREE_METRICS_* prefix)
    5. Keyword overrides

Example:
    >>> settings = load_settings(forof=True)
    >>> settings.get("forof")
    True
    >>> settings.get("no_such_flag")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, Union

from .exceptions import ConfigurationError, InvalidConfigError

logger = logging.getLogger(__name__)

FlagValue = Union[bool, str]

ENV_PREFIX = "ESTREE_METRICS_"
PROJECT_CONFIG_NAME = "estree-metrics.toml"

DEFAULT_FLAGS: Mapping[str, FlagValue] = MappingProxyType(
    {
        "logicalor": True,
        "switchcase": True,
        "forin": False,
        "trycatch": False,
        "forof": False,
    }
)


@dataclass(frozen=True)
class Settings(Mapping):
    """Immutable feature-flag mapping.

    Missing flags read as None through ``.get``; flags no specification
    consults are carried but ignored.

    Attributes:
        flags: Flag name -> bool or enum-like string
    """

    flags: Mapping[str, FlagValue] = field(default_factory=lambda: dict(DEFAULT_FLAGS))

    def __post_init__(self) -> None:
        """Validate and freeze flags."""
        for key, value in self.flags.items():
            if not isinstance(key, str):
                raise InvalidConfigError(key, value, "flag names must be strings")
            if not isinstance(value, (bool, str)):
                raise InvalidConfigError(key, value, "flag values must be booleans or strings")
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))

    def __getitem__(self, key: str) -> FlagValue:
        return self.flags[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.flags)

    def __len__(self) -> int:
        return len(self.flags)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.flags.items())))

    def with_flags(self, **flags: FlagValue) -> Settings:
        """Return a copy with some flags replaced."""
        merged = dict(self.flags)
        merged.update(flags)
        return Settings(merged)


DEFAULT_SETTINGS = Settings()


def load_settings(config_file: Optional[Path] = None, **overrides: Any) -> Settings:
    """Load settings with auto-discovery and merging.

    Args:
        config_file: Optional explicit TOML config path
        **overrides: Direct flag overrides (typically from CLI options)

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If a flag value has the wrong type
    """
    merged: dict[str, Any] = dict(DEFAULT_FLAGS)

    # 1. Project config
    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_settings_table(project_config))
        logger.debug(f"Merged settings from {project_config}")

    # 2. Explicit config file (highest priority from files)
    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_settings_table(config_file))
        logger.debug(f"Merged settings from {config_file}")

    # 3. Environment variables
    merged.update(_load_env_vars(merged))

    # 4. Overrides
    merged.update(overrides)

    return Settings(merged)


def _settings_table(path: Path) -> dict[str, Any]:
    """Read the [settings] table of a TOML file (top level if absent)."""
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    table = data.get("settings", data)
    if not isinstance(table, dict):
        raise ConfigurationError(f"Invalid [settings] table in '{path}'")
    return table


def _load_env_vars(known: Mapping[str, Any]) -> dict[str, Any]:
    """Load ESTREE_METRICS_<FLAG> overrides for flags already known.

    Boolean flags accept true/false/1/0/yes/no/on/off; string flags take
    the raw value.
    """
    result: dict[str, Any] = {}

    for name, current in known.items():
        env_key = f"{ENV_PREFIX}{name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        if isinstance(current, bool):
            result[name] = _parse_bool(env_value, env_key)
        else:
            result[name] = env_value

    return result


def _parse_bool(value: str, key: str) -> bool:
    lower = value.lower()
    if lower in ("true", "1", "yes", "on"):
        return True
    if lower in ("false", "0", "no", "off"):
        return False
    raise InvalidConfigError(key, value, "expected true/false")


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
