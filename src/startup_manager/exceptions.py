"""Exception classes for startup-manager operations."""


class StartupManagerError(Exception):
    """Base exception for startup-manager operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path or entry name the failure relates to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class EntryIOError(StartupManagerError):
    """Raised when reading, writing, or removing an entry file fails."""

    error_prefix = "I/O error"


class MalformedEntryError(StartupManagerError):
    """Raised when an entry file cannot be decoded as text."""

    error_prefix = "Malformed entry"


class PathGuardError(StartupManagerError):
    """Base class for path guard rejections."""

    error_prefix = "Refused path"


class PathTraversalError(PathGuardError):
    """Raised when a path is not directly inside the trusted directory."""

    error_prefix = "Path outside user autostart directory"


class UnsafeTargetError(PathGuardError):
    """Raised when a path is a symlink or not a regular file."""

    error_prefix = "Unsafe target"


class InvalidOperationError(StartupManagerError):
    """Raised when a mutation is not allowed for an entry or input."""

    error_prefix = "Invalid operation"


class SelectionError(StartupManagerError):
    """Raised when no entry, or more than one, matches a selection."""

    error_prefix = "Selection failed"
