"""
config/settings.py — scx_loader Configuration

Loads the optional TOML config that overrides the built-in scheduler flags,
and resolves the flags to launch a scheduler with for a given mode.

Discovery order (first existing file wins):
  1. /etc/scx_loader/config.toml
  2. /etc/scx_loader.toml

When no file is found, init_config() falls back to get_default_config().
A file that exists but cannot be used (empty, bad TOML, wrong types) is an
error; it is never silently replaced by the defaults.

Resolution is per mode field: a scheduler entry that sets only gaming_mode
still inherits the built-in flags for its other three modes. An explicit
empty list is a final answer and does not fall back.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Iterable, Optional

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scx_loader.config.defaults import lookup_default
from scx_loader.exceptions import ConfigEmptyError, ConfigNotFoundError, ConfigParseError
from scx_loader.observability.logger import get_logger
from scx_loader.scheds import SchedMode, SupportedSched

_log = get_logger(__name__)

CONFIG_PATHS: tuple[str, ...] = (
    "/etc/scx_loader/config.toml",
    "/etc/scx_loader.toml",
)


# ─────────────────────────────────────────────────────────────────────────────
# Models
# ─────────────────────────────────────────────────────────────────────────────

class SchedFlags(BaseModel):
    """
    Flags for one scheduler, per mode.

    None means the mode is not configured and the built-in flags apply.
    Tokens are passed to the scheduler verbatim, in order.
    """

    model_config = ConfigDict(frozen=True)

    auto_mode: Optional[list[str]] = None
    gaming_mode: Optional[list[str]] = None
    lowlatency_mode: Optional[list[str]] = None
    powersave_mode: Optional[list[str]] = None

    def for_mode(self, mode: SchedMode) -> Optional[list[str]]:
        return getattr(self, SchedMode(mode).field_name)


class Configuration(BaseModel):
    """
    Root config document.

    scheds is keyed by canonical scheduler name ("scx_lavd", ...). Keys that
    match no SupportedSched are kept but never consulted.
    """

    model_config = ConfigDict(frozen=True)

    default_sched: Optional[SupportedSched] = None
    default_mode: Optional[SchedMode] = None
    scheds: dict[str, SchedFlags] = Field(default_factory=dict)

    def flags_for(self, sched: SupportedSched, mode: SchedMode) -> list[str]:
        return resolve(self, sched, mode)

    @property
    def unknown_scheds(self) -> list[str]:
        """Scheduler keys in this config that no SupportedSched answers to."""
        known = {s.sched_name for s in SupportedSched}
        return sorted(k for k in self.scheds if k not in known)


# ─────────────────────────────────────────────────────────────────────────────
# Resolution
# ─────────────────────────────────────────────────────────────────────────────

def resolve(config: Configuration, sched: SupportedSched, mode: SchedMode) -> list[str]:
    """
    Return the flags to launch sched with in mode.

    User config wins when it sets the mode's field (even to []); otherwise
    the built-in flags from lookup_default() are used.
    """
    sched = SupportedSched(sched)
    sched_config = config.scheds.get(sched.sched_name)
    if sched_config is not None:
        flags = sched_config.for_mode(mode)
        if flags is not None:
            return list(flags)
    return lookup_default(sched, mode)


def _default_sched_flags(sched: SupportedSched) -> SchedFlags:
    return SchedFlags(
        auto_mode=lookup_default(sched, SchedMode.AUTO),
        gaming_mode=lookup_default(sched, SchedMode.GAMING),
        lowlatency_mode=lookup_default(sched, SchedMode.LOW_LATENCY),
        powersave_mode=lookup_default(sched, SchedMode.POWER_SAVE),
    )


def get_default_config() -> Configuration:
    """Built-in config: every known scheduler with all four modes spelled out."""
    return Configuration(
        default_sched=None,
        default_mode=SchedMode.AUTO,
        scheds={sched.sched_name: _default_sched_flags(sched) for sched in SupportedSched},
    )


# ─────────────────────────────────────────────────────────────────────────────
# Loading
# ─────────────────────────────────────────────────────────────────────────────

def get_config_path(paths: Iterable[str | Path] = CONFIG_PATHS) -> Path:
    """Return the first existing config path, or raise ConfigNotFoundError."""
    searched = [Path(p) for p in paths]
    for path in searched:
        if path.exists():
            _log.debug("config.discovered", path=str(path))
            return path
    raise ConfigNotFoundError(searched)


def parse_config_content(content: str, source: Optional[str | Path] = None) -> Configuration:
    """
    Parse a TOML document into a Configuration.

    Raises:
        ConfigEmptyError: content is zero-length.
        ConfigParseError: content is not TOML, or does not match the schema.
    """
    if not content:
        _log.error("config.empty", path=str(source) if source else None)
        raise ConfigEmptyError(source)

    try:
        raw = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        _log.error("config.parse_failed", path=str(source) if source else None, error=str(exc))
        raise ConfigParseError(f"Invalid TOML in config: {exc}") from exc

    try:
        config = Configuration.model_validate(raw)
    except ValidationError as exc:
        _log.error(
            "config.parse_failed",
            path=str(source) if source else None,
            errors=exc.error_count(),
        )
        raise ConfigParseError(f"Config does not match the expected schema:\n{exc}") from exc

    for key in config.unknown_scheds:
        _log.debug("config.unknown_sched", key=key)

    return config


def parse_config_file(path: str | Path) -> Configuration:
    """Read and parse one config file. OSError from reading propagates as-is."""
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    return parse_config_content(content, source=path)


def init_config(paths: Iterable[str | Path] = CONFIG_PATHS) -> Configuration:
    """
    Load the config from the first found path, otherwise fall back to the
    built-in config. Only "not found" falls back; load errors propagate.
    """
    try:
        path = get_config_path(paths)
    except ConfigNotFoundError as exc:
        _log.info("config.not_found", searched=[str(p) for p in exc.searched])
        return get_default_config()

    config = parse_config_file(path)
    _log.info("config.loaded", path=str(path), scheds=sorted(config.scheds))
    return config


def dump_config(config: Configuration) -> str:
    """Serialize config to TOML. Unset values are omitted, [] is kept."""
    return tomli_w.dumps(config.model_dump(mode="json", exclude_none=True))
