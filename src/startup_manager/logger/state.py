"""Logger state shared by the whole process.

Holds the single root logger setup so handlers are attached exactly
once, no matter how many modules call get_logger().
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state.

    Attributes:
        lock: Guards root logger initialization
        root_initialized: Whether the root logger has handlers
        config_applied: Whether settings.conf levels were applied
        queue_listener: Background thread feeding the real handlers
        log_queue: Queue between QueueHandler and QueueListener

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.config_applied = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the process-wide logger state."""
    return _state
