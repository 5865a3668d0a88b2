"""
config/ — Scheduler flag configuration.

    from scx_loader.config import init_config, resolve
    config = init_config()                      # once, at daemon startup
    flags = resolve(config, SupportedSched.LAVD, SchedMode.GAMING)
"""

from scx_loader.config.defaults import lookup_default
from scx_loader.config.settings import (
    CONFIG_PATHS,
    Configuration,
    SchedFlags,
    dump_config,
    get_config_path,
    get_default_config,
    init_config,
    parse_config_content,
    parse_config_file,
    resolve,
)

__all__ = [
    "CONFIG_PATHS",
    "Configuration",
    "SchedFlags",
    "dump_config",
    "get_config_path",
    "get_default_config",
    "init_config",
    "lookup_default",
    "parse_config_content",
    "parse_config_file",
    "resolve",
]
