"""Typed configuration structures.

These TypedDicts describe the parsed settings file; they carry no I/O.
"""

from pathlib import Path
from typing import TypedDict


class DirectoryConfig(TypedDict):
    """Filesystem locations used by the application."""

    user_autostart: Path
    system_autostart: Path


class ViewConfig(TypedDict):
    """Default list filter and sort order."""

    sort: str
    show_enabled: bool
    show_disabled: bool
    show_user: bool
    show_system: bool


class GlobalConfig(TypedDict):
    """Complete global configuration."""

    config_version: str
    log_level: str
    console_log_level: str
    directory: DirectoryConfig
    view: ViewConfig
