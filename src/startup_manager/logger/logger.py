"""Public logging API.

- setup_logging(): initialize the root logger once and return a logger
- get_logger(): the call every module makes at import time
- flush_all_handlers(): wait for queued records to reach the handlers
- clear_logger_state(): reset everything, for tests
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from startup_manager.constants import LOG_ROOT_NAME
from startup_manager.logger.config import load_log_settings
from startup_manager.logger.handlers import ConfigurationError, setup_root_logger
from startup_manager.logger.state import get_state


def flush_all_handlers() -> None:
    """Wait for the queue to drain, then flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener does not use task_done(), so poll the queue
    timeout = 5.0
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > timeout:
            break
        time.sleep(0.01)

    # Records may be dequeued but not yet handled
    time.sleep(0.1)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener at interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = LOG_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Initialize the root logger if needed and return ``name``'s logger.

    If the log file cannot be opened, logging continues on the console
    only and a warning is emitted.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level
        file_level: File log level
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    """
    state = get_state()
    file_error: ConfigurationError | None = None
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            console_level = console_level or cfg_console
            file_level = file_level or cfg_file
            log_file = log_file or cfg_path
            try:
                setup_root_logger(
                    state,
                    console_level,
                    file_level,
                    log_file,
                    enable_file_logging,
                )
            except ConfigurationError as e:
                file_error = e
                setup_root_logger(
                    state, console_level, file_level, log_file, False
                )

    if file_error is not None:
        logging.getLogger(LOG_ROOT_NAME).warning(
            "File logging disabled: %s", file_error
        )
    return logging.getLogger(name)


def get_logger(
    name: str = LOG_ROOT_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get a logger in the ``startup_manager`` hierarchy.

    Example:
        >>> from startup_manager.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Loaded %d entries", count)

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


def clear_logger_state() -> None:
    """Reset the logging system; for test isolation only.

    Stops the QueueListener, closes and removes handlers and forgets the
    ``startup_manager`` loggers.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict):
            if logger_name.startswith(LOG_ROOT_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
                del logging.Logger.manager.loggerDict[logger_name]
