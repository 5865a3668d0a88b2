"""
scheds.py — Scheduler and Mode Identities

Closed enumerations shared by the config layer. Values are the exact strings
used in config documents, so pydantic parses them directly:

    default_sched = "scx_lavd"   → SupportedSched.LAVD
    default_mode  = "Gaming"     → SchedMode.GAMING
"""

from __future__ import annotations

from enum import Enum

from scx_loader.exceptions import UnknownSchedulerError


class SupportedSched(str, Enum):
    BPFLAND = "scx_bpfland"
    RUSTY   = "scx_rusty"
    LAVD    = "scx_lavd"

    @property
    def sched_name(self) -> str:
        """Canonical name, used as the key under [scheds.*] in config files."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "SupportedSched":
        try:
            return cls(name)
        except ValueError:
            raise UnknownSchedulerError(name) from None


class SchedMode(str, Enum):
    AUTO        = "Auto"
    GAMING      = "Gaming"
    LOW_LATENCY = "LowLatency"
    POWER_SAVE  = "PowerSave"

    @property
    def field_name(self) -> str:
        """Name of the SchedFlags field that carries flags for this mode."""
        return _MODE_FIELDS[self]


_MODE_FIELDS: dict[SchedMode, str] = {
    SchedMode.AUTO:        "auto_mode",
    SchedMode.GAMING:      "gaming_mode",
    SchedMode.LOW_LATENCY: "lowlatency_mode",
    SchedMode.POWER_SAVE:  "powersave_mode",
}
