"""
================================================================================
Filter Tools Common Utilities
================================================================================

Shared configuration lookup and logging setup.

Usage:
    from filter_tools.common import get_config, init_logger

    init_logger()
    level = get_config("logging.level", "INFO")

================================================================================
"""

from .global_config import get_config, init_logger, reload_config

__all__ = [
    "get_config",
    "init_logger",
    "reload_config",
]
