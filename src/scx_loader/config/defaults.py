"""
config/defaults.py — Built-in Scheduler Flags

Hard-coded flags used whenever the user config does not set a mode for a
scheduler. Total over every (SupportedSched, SchedMode) pair.
"""

from __future__ import annotations

from scx_loader.scheds import SchedMode, SupportedSched

# Auto never carries built-in flags (scx_lavd may grow --auto later).
# scx_rusty has no mode-specific tuning at all.
_DEFAULT_FLAGS: dict[SupportedSched, dict[SchedMode, tuple[str, ...]]] = {
    SupportedSched.BPFLAND: {
        SchedMode.AUTO:        (),
        SchedMode.GAMING:      ("-k", "-m", "performance"),
        SchedMode.LOW_LATENCY: ("--lowlatency",),
        SchedMode.POWER_SAVE:  ("-m", "powersave"),
    },
    SupportedSched.LAVD: {
        SchedMode.AUTO:        (),
        SchedMode.GAMING:      ("--performance",),
        SchedMode.LOW_LATENCY: ("--performance",),
        SchedMode.POWER_SAVE:  ("--powersave",),
    },
    SupportedSched.RUSTY: {
        SchedMode.AUTO:        (),
        SchedMode.GAMING:      (),
        SchedMode.LOW_LATENCY: (),
        SchedMode.POWER_SAVE:  (),
    },
}


def lookup_default(sched: SupportedSched, mode: SchedMode) -> list[str]:
    """Return a fresh list of the built-in flags for sched in mode."""
    return list(_DEFAULT_FLAGS[SupportedSched(sched)][SchedMode(mode)])
