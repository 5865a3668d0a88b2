"""
tests/unit/test_logger.py — Structured Logging Setup
"""

from __future__ import annotations

import json
import logging

from scx_loader.observability.logger import get_logger, setup_logging


def _flush_root_handlers() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


class TestSetupLogging:
    def test_file_handler_writes_json(self, tmp_path):
        setup_logging(level="DEBUG", log_dir=tmp_path, console_output=False)
        log = get_logger("scx_loader.test")
        log.info("config.loaded", path="/etc/scx_loader.toml", scheds=["scx_lavd"])
        _flush_root_handlers()

        lines = (tmp_path / "scx_loader.log").read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["event"] == "config.loaded"
        assert record["path"] == "/etc/scx_loader.toml"
        assert record["scheds"] == ["scx_lavd"]
        assert record["level"] == "info"
        assert record["logger"] == "scx_loader.test"

    def test_level_filters_file_output(self, tmp_path):
        setup_logging(level="WARNING", log_dir=tmp_path, console_output=False)
        log = get_logger("scx_loader.test")
        log.debug("config.discovered", path="/etc/scx_loader.toml")
        log.warning("config.something")
        _flush_root_handlers()

        text = (tmp_path / "scx_loader.log").read_text(encoding="utf-8")
        assert "config.discovered" not in text
        assert "config.something" in text

    def test_no_file_without_log_dir(self, tmp_path):
        setup_logging(level="INFO", console_output=False)
        get_logger("scx_loader.test").info("config.not_found")
        assert not list(tmp_path.iterdir())


class TestGetLogger:
    def test_initial_values_bound(self, tmp_path):
        setup_logging(level="INFO", log_dir=tmp_path, console_output=False)
        get_logger("scx_loader.test", component="config").info("config.loaded")
        _flush_root_handlers()

        record = json.loads(
            (tmp_path / "scx_loader.log").read_text(encoding="utf-8").splitlines()[-1]
        )
        assert record["component"] == "config"
