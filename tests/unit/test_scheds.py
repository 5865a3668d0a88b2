"""
tests/unit/test_scheds.py — Scheduler and Mode Identities
"""

from __future__ import annotations

import pytest

from scx_loader.exceptions import ScxLoaderError, UnknownSchedulerError
from scx_loader.scheds import SchedMode, SupportedSched


class TestSupportedSched:
    def test_canonical_names(self):
        assert SupportedSched.BPFLAND.sched_name == "scx_bpfland"
        assert SupportedSched.RUSTY.sched_name == "scx_rusty"
        assert SupportedSched.LAVD.sched_name == "scx_lavd"

    def test_from_name(self):
        assert SupportedSched.from_name("scx_lavd") is SupportedSched.LAVD

    def test_from_name_unknown(self):
        with pytest.raises(UnknownSchedulerError) as exc_info:
            SupportedSched.from_name("scx_unknown")
        assert exc_info.value.name == "scx_unknown"
        assert isinstance(exc_info.value, ScxLoaderError)

    def test_from_name_is_case_sensitive(self):
        with pytest.raises(UnknownSchedulerError):
            SupportedSched.from_name("SCX_LAVD")


class TestSchedMode:
    @pytest.mark.parametrize("mode, field", [
        (SchedMode.AUTO,        "auto_mode"),
        (SchedMode.GAMING,      "gaming_mode"),
        (SchedMode.LOW_LATENCY, "lowlatency_mode"),
        (SchedMode.POWER_SAVE,  "powersave_mode"),
    ])
    def test_field_names(self, mode, field):
        assert mode.field_name == field

    def test_document_values(self):
        assert [m.value for m in SchedMode] == ["Auto", "Gaming", "LowLatency", "PowerSave"]
