"""Filesystem locations used by startup-manager.

Follows the XDG base directory layout: settings and logs live under
``$XDG_CONFIG_HOME/startup-manager`` and the per-user autostart
directory is ``$XDG_CONFIG_HOME/autostart``.
"""

import os
from pathlib import Path

from startup_manager.constants import (
    AUTOSTART_DIR_NAME,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    ENV_CONFIG_DIR,
    ENV_XDG_CONFIG_HOME,
    SYSTEM_AUTOSTART_DIR,
)


class Paths:
    """Application paths, resolved from the environment on each call."""

    @classmethod
    def config_home(cls) -> Path:
        """Return ``$XDG_CONFIG_HOME``, defaulting to ``~/.config``."""
        config_home = os.getenv(ENV_XDG_CONFIG_HOME)
        if config_home:
            return Path(config_home).expanduser()
        return Path.home() / ".config"

    @classmethod
    def config_dir(cls) -> Path:
        """Return the settings directory.

        ``STARTUP_MANAGER_CONFIG_DIR`` takes precedence over the XDG
        location.
        """
        override = os.getenv(ENV_CONFIG_DIR)
        if override:
            return Path(override).expanduser()
        return cls.config_home() / CONFIG_DIR_NAME

    @classmethod
    def settings_file(cls, config_dir: Path | None = None) -> Path:
        """Return the settings.conf path inside ``config_dir``."""
        return (config_dir or cls.config_dir()) / CONFIG_FILE_NAME

    @classmethod
    def user_autostart_dir(cls) -> Path:
        """Return the default per-user autostart directory."""
        return cls.config_home() / AUTOSTART_DIR_NAME

    @classmethod
    def system_autostart_dir(cls) -> Path:
        """Return the default system autostart directory."""
        return Path(SYSTEM_AUTOSTART_DIR)

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ``~`` and make the path absolute without resolving links.

        Symlinks are left in place so PathGuard sees the configured path.

        Example:
            >>> Paths.expand_path("~/.config/autostart")
            PosixPath('/home/user/.config/autostart')

        """
        return Path(os.path.abspath(Path(path_str).expanduser()))
