"""Configuration management.

This package provides:
- GlobalConfigManager: INI settings management (from settings.py)
- Paths: XDG path resolution (from paths.py)
- Parser utilities: INI comment helpers (from parser.py)
"""

from startup_manager.config.parser import (
    ConfigCommentManager,
    strip_inline_comment,
)
from startup_manager.config.paths import Paths
from startup_manager.config.settings import GlobalConfigManager
from startup_manager.domain.types import GlobalConfig

__all__ = [
    "ConfigCommentManager",
    "GlobalConfig",
    "GlobalConfigManager",
    "Paths",
    "strip_inline_comment",
]
