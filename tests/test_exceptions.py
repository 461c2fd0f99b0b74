"""Tests for exception formatting."""

import pytest

from startup_manager.exceptions import (
    EntryIOError,
    InvalidOperationError,
    MalformedEntryError,
    PathTraversalError,
    SelectionError,
    StartupManagerError,
    UnsafeTargetError,
)


def test_message_with_target() -> None:
    """Test the target is included in the formatted message."""
    error = EntryIOError("disk full", target="/tmp/a.desktop")
    assert str(error) == "I/O error for '/tmp/a.desktop': disk full"
    assert error.message == "disk full"
    assert error.target == "/tmp/a.desktop"


def test_message_without_target() -> None:
    """Test formatting without a target."""
    error = InvalidOperationError("Name and command are required")
    assert str(error) == "Invalid operation: Name and command are required"


@pytest.mark.parametrize(
    "error_class",
    [
        EntryIOError,
        InvalidOperationError,
        MalformedEntryError,
        PathTraversalError,
        SelectionError,
        UnsafeTargetError,
    ],
)
def test_all_errors_share_base(error_class: type[StartupManagerError]) -> None:
    """Test every error can be caught as StartupManagerError."""
    with pytest.raises(StartupManagerError):
        raise error_class("boom")
