"""Centralized constants module for startup-manager.

This module is the single source of truth for shared constants: the
desktop entry format keys, filesystem locations, configuration names and
logging settings. Constants use typing.Final annotations.

Usage:
    from startup_manager.constants import DESKTOP_SECTION_NAME
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"

# Application-specific subdirectory under $XDG_CONFIG_HOME
CONFIG_DIR_NAME: Final[str] = "startup-manager"

# Environment overrides
ENV_CONFIG_DIR: Final[str] = "STARTUP_MANAGER_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "STARTUP_MANAGER_LOG_DIR"
ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_SORT_KEY: Final[str] = "name_asc"

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Config section and key names
SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_DIRECTORY: Final[str] = "directory"
SECTION_VIEW: Final[str] = "view"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"

KEY_USER_AUTOSTART: Final[str] = "user_autostart"
KEY_SYSTEM_AUTOSTART: Final[str] = "system_autostart"

KEY_SORT: Final[str] = "sort"
KEY_SHOW_ENABLED: Final[str] = "show_enabled"
KEY_SHOW_DISABLED: Final[str] = "show_disabled"
KEY_SHOW_USER: Final[str] = "show_user"
KEY_SHOW_SYSTEM: Final[str] = "show_system"

VIEW_FLAG_KEYS: Final[tuple[str, ...]] = (
    KEY_SHOW_ENABLED,
    KEY_SHOW_DISABLED,
    KEY_SHOW_USER,
    KEY_SHOW_SYSTEM,
)

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "startup-manager.log"
LOG_ROOT_NAME: Final[str] = "startup_manager"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Autostart locations
# =============================================================================

# Per-user autostart directory, relative to $XDG_CONFIG_HOME
AUTOSTART_DIR_NAME: Final[str] = "autostart"
SYSTEM_AUTOSTART_DIR: Final[str] = "/etc/xdg/autostart"

# =============================================================================
# Desktop (.desktop) file format
# =============================================================================

DESKTOP_FILE_EXTENSION: Final[str] = ".desktop"
DESKTOP_SECTION_NAME: Final[str] = "Desktop Entry"
DESKTOP_SECTION_HEADER: Final[str] = f"[{DESKTOP_SECTION_NAME}]"
DESKTOP_FILE_TYPE: Final[str] = "Application"
DESKTOP_COMMENT_PREFIX: Final[str] = "#"

KEY_TYPE: Final[str] = "Type"
KEY_NAME: Final[str] = "Name"
KEY_EXEC: Final[str] = "Exec"
KEY_HIDDEN: Final[str] = "Hidden"
KEY_AUTOSTART_ENABLED: Final[str] = "X-GNOME-Autostart-enabled"
LOCALIZED_NAME_PREFIX: Final[str] = "Name["

# Keys owned by dedicated StartupEntry fields; never written from extras
DEDICATED_KEYS: Final[frozenset[str]] = frozenset(
    {KEY_NAME, KEY_EXEC, KEY_HIDDEN, KEY_AUTOSTART_ENABLED, KEY_TYPE}
)

DEFAULT_ENTRY_NAME: Final[str] = "Unnamed"
DEFAULT_SLUG: Final[str] = "entry"

# Temp file naming for atomic rewrites
ENTRY_TMP_PREFIX: Final[str] = ".startup-manager-"
ENTRY_TMP_SUFFIX: Final[str] = ".tmp"
