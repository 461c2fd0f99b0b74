"""Domain types for startup entries and configuration."""

from startup_manager.domain.entry import EntrySource, StartupEntry
from startup_manager.domain.types import DirectoryConfig, GlobalConfig, ViewConfig

__all__ = [
    "DirectoryConfig",
    "EntrySource",
    "GlobalConfig",
    "StartupEntry",
    "ViewConfig",
]
