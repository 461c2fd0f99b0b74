"""Pytest configuration and fixtures for startup-manager tests."""

import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

# Keep test runs from writing into the real log directory. Must be set
# before startup_manager is imported, since loggers initialize on import.
os.environ.setdefault(
    "STARTUP_MANAGER_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "startup-manager-test-logs"),
)

WriteDesktop = Callable[[Path, str, str], Path]


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("startup_manager"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def user_dir(tmp_path: Path) -> Path:
    """Create an empty user autostart directory."""
    directory = tmp_path / "config" / "autostart"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def system_dir(tmp_path: Path) -> Path:
    """Create an empty system autostart directory."""
    directory = tmp_path / "etc" / "xdg" / "autostart"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def write_desktop() -> WriteDesktop:
    """Return a helper writing ``content`` to ``directory/file_name``."""

    def _write(directory: Path, file_name: str, content: str) -> Path:
        path = directory / file_name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
