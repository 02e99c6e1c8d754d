"""
Configuration management.
"""

from .config import (
    AvailabilityConfig,
    get_config,
    LogConfig,
    LangConfig,
    PluginConfig,
    PACKAGED_LANG_DIR,
)

__all__ = [
    "AvailabilityConfig",
    "get_config",
    "LogConfig",
    "LangConfig",
    "PluginConfig",
    "PACKAGED_LANG_DIR",
]
