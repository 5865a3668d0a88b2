"""
scx_loader — sched_ext scheduler flag configuration.

Resolves the command-line flags a loader daemon passes to a sched_ext
scheduler for a requested mode, from /etc/scx_loader config or built-in
defaults.
"""

from scx_loader.config import (
    CONFIG_PATHS,
    Configuration,
    SchedFlags,
    dump_config,
    get_config_path,
    get_default_config,
    init_config,
    lookup_default,
    parse_config_content,
    parse_config_file,
    resolve,
)
from scx_loader.exceptions import (
    ConfigEmptyError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ScxLoaderError,
    UnknownSchedulerError,
)
from scx_loader.observability import get_logger, setup_logging
from scx_loader.scheds import SchedMode, SupportedSched

__version__ = "1.0.0"

__all__ = [
    "CONFIG_PATHS",
    "Configuration",
    "ConfigEmptyError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "SchedFlags",
    "SchedMode",
    "ScxLoaderError",
    "SupportedSched",
    "UnknownSchedulerError",
    "dump_config",
    "get_config_path",
    "get_default_config",
    "get_logger",
    "init_config",
    "lookup_default",
    "parse_config_content",
    "parse_config_file",
    "resolve",
    "setup_logging",
]
