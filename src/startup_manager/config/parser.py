"""INI helpers for the settings file.

Provides inline comment stripping and the explanatory comments written
into a freshly created settings.conf.
"""

from datetime import UTC, datetime

from startup_manager.constants import (
    CONFIG_VERSION,
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_VIEW,
)


def strip_inline_comment(value: str) -> str:
    """Strip an inline comment (anything after two spaces and ``#``).

    Args:
        value: Raw configuration value

    Returns:
        Value without the inline comment

    """
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class ConfigCommentManager:
    """Comments written into settings.conf for the user's benefit."""

    @staticmethod
    def get_file_header() -> str:
        """Return the file header with a timestamp."""
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# Startup Manager Configuration
# Settings for listing and editing XDG autostart entries.
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Return the comment block written above each section."""
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
# config_version: Version of configuration format (DO NOT EDIT)
# log_level: Detail level for the log file (DEBUG, INFO, WARNING, ERROR)
# console_log_level: Console detail level (DEBUG, INFO, WARNING, ERROR).
#   Command output is printed at INFO.

""",
            SECTION_DIRECTORY: """
# ========================================
# DIRECTORY PATHS
# ========================================
# user_autostart: Writable per-user autostart directory. This is the
#   only directory entries are ever created in, rewritten or deleted.
# system_autostart: Read-only system autostart directory

""",
            SECTION_VIEW: """
# ========================================
# LIST DEFAULTS
# ========================================
# sort: name_asc, name_desc, status_enabled_first,
#   source_user_first or source_system_first
# show_*: which entries "list" shows when no filter flag is given.
#   Turning off both flags of a pair shows everything for that pair.

""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Return inline comments for specific keys."""
        return {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: "# DO NOT MODIFY - Config format version",
            },
            SECTION_DIRECTORY: {},
            SECTION_VIEW: {},
        }
