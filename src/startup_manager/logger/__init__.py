"""Logging utilities for startup-manager.

All modules log through one logger tree rooted at ``startup_manager``:

    Module logger → QueueHandler → Queue → QueueListener thread
                                               ↓
                                   Console + rotating file handlers

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Use %-formatting in log calls, never f-strings
    4. Handlers live only on the root ``startup_manager`` logger

Console output prints INFO records as bare messages, which the CLI uses
for its regular output; warnings and errors are timestamped and colored.

Environment Variables:
    STARTUP_MANAGER_LOG_DIR: Override the log directory (used by tests)
"""

from typing import TYPE_CHECKING

from startup_manager.logger.config import (
    set_console_level as _set_console_level,
)
from startup_manager.logger.config import (
    update_logger_from_config as _update_config,
)
from startup_manager.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from startup_manager.logger.handlers import ConfigurationError
from startup_manager.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from startup_manager.logger.state import _state, get_state

if TYPE_CHECKING:
    from startup_manager.domain.types import GlobalConfig

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config: "GlobalConfig") -> None:
    """Apply configured log levels to the running handlers."""
    _update_config(get_state(), config)


def set_console_level(level: str) -> None:
    """Change the console handler level, e.g. "DEBUG" for --verbose."""
    _set_console_level(get_state(), level)
