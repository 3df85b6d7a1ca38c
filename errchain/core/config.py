"""Typed configuration loading and access.

Configuration lives in a small TOML file:

    [snapshot]
    enabled = true   # capture a stack snapshot when an error is built
    limit = 0        # keep at most this many frames; 0 keeps all

The active config is process-wide and read by ChainedError at construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "Config",
    "SnapshotConfig",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    "configure",
    "active_config",
]

type StrDict = dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class SnapshotConfig:
    """Stack snapshot capture settings."""

    enabled: bool = True
    limit: int = 0

    @property
    def frame_limit(self) -> int | None:
        """Limit in the form ``traceback.extract_stack`` expects (None = all)."""
        return self.limit or None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    snapshot: SnapshotConfig = field(default_factory=SnapshotConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            TypeError: A value has the wrong type.
            ValueError: A value is out of range.
        """
        snapshot = _get_table(data, "snapshot")

        enabled = snapshot.get("enabled", True)
        if not isinstance(enabled, bool):
            raise TypeError(f"snapshot.enabled must be a boolean, got {enabled!r}")

        limit = snapshot.get("limit", 0)
        # bool is an int subclass
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise TypeError(f"snapshot.limit must be an integer, got {limit!r}")
        if limit < 0:
            raise ValueError(f"snapshot.limit must be >= 0, got {limit}")

        return cls(snapshot=SnapshotConfig(enabled=enabled, limit=limit))


def _get_table(data: Mapping[str, object], key: str) -> StrDict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"[{key}] must be a table")
    return {str(k): v for k, v in value.items()}


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        return Ok(tomllib.loads(content.decode("utf-8")))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any failure."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()


_active = Config()


def configure(config: Config) -> Config:
    """Make ``config`` the active config and return the one it replaces."""
    global _active
    previous, _active = _active, config
    return previous


def active_config() -> Config:
    return _active
