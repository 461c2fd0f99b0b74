"""Bootstrap settings and config-driven updates for the logging system.

The root logger is created while modules are being imported, before the
settings file has been read, so it starts from fixed defaults. The CLI
calls update_logger_from_config() once the configuration is loaded.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from startup_manager.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_XDG_CONFIG_HOME,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from startup_manager.domain.types import GlobalConfig
    from startup_manager.logger.state import _LoggerState


def default_log_dir() -> Path:
    """Return the log directory, honoring STARTUP_MANAGER_LOG_DIR.

    The environment override keeps test runs from writing into the
    user's real configuration directory.
    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser()
    config_home = os.getenv(ENV_XDG_CONFIG_HOME)
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / CONFIG_DIR_NAME / "logs"


def load_log_settings() -> tuple[str, str, Path]:
    """Return bootstrap (console level, file level, log path)."""
    return (
        DEFAULT_CONSOLE_LOG_LEVEL,
        DEFAULT_LOG_LEVEL,
        default_log_dir() / LOG_FILE_NAME,
    )


def set_console_level(state: "_LoggerState", level: str) -> None:
    """Set the level of the console handler only."""
    if state.queue_listener is None:
        return
    numeric = getattr(logging, level, logging.INFO)
    for handler in state.queue_listener.handlers:
        if not isinstance(handler, RotatingFileHandler):
            handler.setLevel(numeric)


def update_logger_from_config(
    state: "_LoggerState", config: "GlobalConfig"
) -> None:
    """Apply log levels from the loaded configuration.

    Only handler levels change; handlers are never added or removed.

    Args:
        state: Logger state object
        config: Loaded global configuration

    """
    if state.queue_listener is None:
        return

    console_level = getattr(
        logging, config["console_log_level"], logging.INFO
    )
    file_level = getattr(logging, config["log_level"], logging.INFO)
    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(file_level)
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(console_level)

    state.config_applied = True
