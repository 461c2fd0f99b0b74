"""Global configuration manager for the INI settings file."""

import configparser
from pathlib import Path

from startup_manager.config.parser import (
    ConfigCommentManager,
    strip_inline_comment,
)
from startup_manager.config.paths import Paths
from startup_manager.constants import (
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SORT_KEY,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_SHOW_DISABLED,
    KEY_SHOW_ENABLED,
    KEY_SHOW_SYSTEM,
    KEY_SHOW_USER,
    KEY_SORT,
    KEY_SYSTEM_AUTOSTART,
    KEY_USER_AUTOSTART,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_VIEW,
    VALID_LOG_LEVELS,
    VIEW_FLAG_KEYS,
)
from startup_manager.core.collection import SortKey
from startup_manager.domain.types import DirectoryConfig, GlobalConfig, ViewConfig
from startup_manager.exceptions import EntryIOError
from startup_manager.logger import get_logger

logger = get_logger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]


class GlobalConfigManager:
    """Loads and saves settings.conf."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize global config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.config_dir())

        """
        self.config_dir = config_dir or Paths.config_dir()
        self.settings_file = Paths.settings_file(self.config_dir)

    def get_default_global_config(self) -> RawConfigDict:
        """Return default configuration values as INI strings."""
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_DIRECTORY: {
                KEY_USER_AUTOSTART: str(Paths.user_autostart_dir()),
                KEY_SYSTEM_AUTOSTART: str(Paths.system_autostart_dir()),
            },
            SECTION_VIEW: {
                KEY_SORT: DEFAULT_SORT_KEY,
                **{key: "true" for key in VIEW_FLAG_KEYS},
            },
        }

    def _create_parser(self) -> configparser.ConfigParser:
        return configparser.ConfigParser(interpolation=None)

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Build a ConfigParser populated with ``defaults``."""
        config = self._create_parser()
        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})
        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))
        return config

    def load_global_config(self) -> GlobalConfig:
        """Load configuration, creating the file from defaults if missing.

        Returns:
            Typed global configuration

        Raises:
            EntryIOError: If the settings file exists but cannot be parsed
                or read

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except (configparser.Error, OSError) as e:
                msg = f"cannot read settings: {e}"
                raise EntryIOError(msg, target=str(self.settings_file)) from e
            logger.debug("Loaded settings from %s", self.settings_file)
        else:
            loaded = self._convert_to_global_config(config)
            try:
                self.save_global_config(loaded)
            except OSError as e:
                logger.warning(
                    "Could not create settings file %s: %s",
                    self.settings_file,
                    e,
                )
            return loaded

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Write ``config`` to settings.conf with explanatory comments."""
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: config["config_version"],
                KEY_LOG_LEVEL: config["log_level"],
                KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            },
            SECTION_DIRECTORY: {
                key: str(path) for key, path in config["directory"].items()
            },
            SECTION_VIEW: {
                key: str(value).lower() for key, value in config["view"].items()
            },
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())
            for section, values in sections.items():
                f.write(section_comments[section])
                f.write(f"[{section}]\n")
                for key, value in values.items():
                    inline_comment = key_comments[section].get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")
        logger.debug("Saved settings to %s", self.settings_file)

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert a ConfigParser into a validated GlobalConfig.

        Invalid values are replaced by their defaults with a warning.
        """

        def get_value(section: str, key: str, default: str) -> str:
            value = config.get(section, key, fallback=default)
            return strip_inline_comment(value).strip()

        def get_level(key: str, default: str) -> str:
            value = get_value(SECTION_DEFAULT, key, default).upper()
            if value not in VALID_LOG_LEVELS:
                logger.warning(
                    "Invalid %s '%s' in settings, using %s",
                    key,
                    value,
                    default,
                )
                return default
            return value

        def get_flag(key: str) -> bool:
            value = get_value(SECTION_VIEW, key, "true")
            try:
                return config.BOOLEAN_STATES[value.lower()]
            except KeyError:
                logger.warning(
                    "Invalid boolean '%s' for %s in settings, using true",
                    value,
                    key,
                )
                return True

        sort_value = get_value(SECTION_VIEW, KEY_SORT, DEFAULT_SORT_KEY)
        try:
            sort = SortKey.from_name(sort_value).value
        except ValueError as e:
            logger.warning("%s, using %s", e, DEFAULT_SORT_KEY)
            sort = DEFAULT_SORT_KEY

        directory = DirectoryConfig(
            user_autostart=Paths.expand_path(
                get_value(
                    SECTION_DIRECTORY,
                    KEY_USER_AUTOSTART,
                    str(Paths.user_autostart_dir()),
                )
            ),
            system_autostart=Paths.expand_path(
                get_value(
                    SECTION_DIRECTORY,
                    KEY_SYSTEM_AUTOSTART,
                    str(Paths.system_autostart_dir()),
                )
            ),
        )

        view = ViewConfig(
            sort=sort,
            show_enabled=get_flag(KEY_SHOW_ENABLED),
            show_disabled=get_flag(KEY_SHOW_DISABLED),
            show_user=get_flag(KEY_SHOW_USER),
            show_system=get_flag(KEY_SHOW_SYSTEM),
        )

        return GlobalConfig(
            config_version=get_value(
                SECTION_DEFAULT, KEY_CONFIG_VERSION, CONFIG_VERSION
            ),
            log_level=get_level(KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            console_log_level=get_level(
                KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
            ),
            directory=directory,
            view=view,
        )
