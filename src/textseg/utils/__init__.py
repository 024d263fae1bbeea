# src/textseg/utils/__init__.py
"""
utils.

Does: Provide config loading and topic-filtered debug logging for textseg.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Profiles, pipeline, CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    is_topic_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_topic_enabled",
    "reload_topics",
]
