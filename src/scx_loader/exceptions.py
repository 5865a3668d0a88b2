"""
exceptions.py — scx_loader Error Hierarchy

All scx_loader-specific exceptions live here. The config layer raises typed
subclasses of ScxLoaderError, never bare Exception.

Import from here, not from individual modules:
    from scx_loader.exceptions import ConfigNotFoundError, ConfigParseError

Hierarchy:
    ScxLoaderError
    ├── ConfigError
    │   ├── ConfigNotFoundError
    │   ├── ConfigEmptyError
    │   └── ConfigParseError
    └── UnknownSchedulerError
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


# ─────────────────────────────────────────────────────────────────────────────
# Root
# ─────────────────────────────────────────────────────────────────────────────

class ScxLoaderError(Exception):
    """Base class for all scx_loader exceptions."""


# ─────────────────────────────────────────────────────────────────────────────
# Config layer
# ─────────────────────────────────────────────────────────────────────────────

class ConfigError(ScxLoaderError):
    """Base for configuration discovery and loading errors."""


class ConfigNotFoundError(ConfigError):
    """No configuration file exists at any of the searched paths."""

    def __init__(self, searched: Iterable[str | Path], message: str = "") -> None:
        self.searched = [Path(p) for p in searched]
        super().__init__(
            message or "Failed to find config! Searched: "
            + ", ".join(str(p) for p in self.searched)
        )


class ConfigEmptyError(ConfigError):
    """The configuration file exists but has no content."""

    def __init__(self, path: Optional[str | Path] = None) -> None:
        self.path = Path(path) if path is not None else None
        where = f" ({self.path})" if self.path is not None else ""
        super().__init__(f"The config file is empty!{where}")


class ConfigParseError(ConfigError):
    """
    The document is not valid TOML or does not match the config schema.

    The underlying tomllib / pydantic error is kept as __cause__.
    """


# ─────────────────────────────────────────────────────────────────────────────
# Scheduler identities
# ─────────────────────────────────────────────────────────────────────────────

class UnknownSchedulerError(ScxLoaderError):
    """A scheduler name does not match any supported scheduler."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown scheduler: '{name}'")


__all__ = [
    "ScxLoaderError",
    # Config
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigEmptyError",
    "ConfigParseError",
    # Schedulers
    "UnknownSchedulerError",
]
