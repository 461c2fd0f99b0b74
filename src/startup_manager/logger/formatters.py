"""Console formatters.

INFO records are user-facing command output and are printed as the bare
message. Everything else gets a timestamped, colored structured line.
"""

import logging

from startup_manager.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that colors the level name with ANSI codes."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` with a colored level name.

        The record's levelname is restored afterwards so other handlers
        see the plain value.
        """
        if record.levelname not in LOG_COLORS:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = (
            f"{LOG_COLORS[original_levelname]}{original_levelname}"
            f"{LOG_COLORS['RESET']}"
        )
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class SimpleConsoleFormatter(logging.Formatter):
    """Formatter that outputs only the message."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the rendered message without metadata."""
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Bare message for INFO, colored structured output for other levels.

    Example Output:
        INFO:     "Enabled Syncthing"
        WARNING:  "12:30:45 - startup_manager.core.discovery - WARNING - ..."
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize with the structured format used for non-INFO."""
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Pick the simple or structured format by level."""
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)
