"""
observability/ — Structured logging for scx_loader.

    from scx_loader.observability import get_logger, setup_logging
"""

from scx_loader.observability.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
