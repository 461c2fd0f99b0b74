"""Path safety checks for mutating user autostart entries.

Only one directory is trusted for writes and deletes: the user's
autostart directory. Every create, rewrite and delete goes through
PathGuard.authorize() first.
"""

from pathlib import Path

from startup_manager.exceptions import PathTraversalError, UnsafeTargetError
from startup_manager.logger import get_logger

logger = get_logger(__name__)


class PathGuard:
    """Authorizes paths directly inside a single trusted directory."""

    def __init__(self, trusted_dir: Path) -> None:
        """Initialize the guard.

        Args:
            trusted_dir: The only directory mutations may touch

        """
        self.trusted_dir = trusted_dir

    def authorize(self, path: Path) -> Path:
        """Validate ``path`` before a mutating filesystem operation.

        The parent directory must resolve to exactly the resolved trusted
        directory, which rejects ``..`` escapes, symlinked parents and
        paths elsewhere. An existing target must be a regular file and
        not a symlink. A target that does not exist yet is accepted.

        Args:
            path: Candidate entry path

        Returns:
            The same path, unchanged

        Raises:
            PathTraversalError: If the parent is not the trusted directory
            UnsafeTargetError: If the target is a symlink or not a file

        """
        try:
            trusted = self.trusted_dir.resolve(strict=True)
        except OSError as e:
            msg = f"cannot resolve trusted directory {self.trusted_dir}: {e}"
            raise PathTraversalError(msg, target=str(path)) from e

        try:
            parent = path.parent.resolve(strict=True)
        except OSError as e:
            msg = f"cannot resolve parent directory: {e}"
            raise PathTraversalError(msg, target=str(path)) from e

        if parent != trusted:
            logger.warning("Rejected path outside %s: %s", trusted, path)
            msg = f"parent resolves to {parent}, expected {trusted}"
            raise PathTraversalError(msg, target=str(path))

        if path.is_symlink():
            msg = "refusing to operate on a symlinked entry"
            raise UnsafeTargetError(msg, target=str(path))
        if path.exists() and not path.is_file():
            msg = "entry path is not a regular file"
            raise UnsafeTargetError(msg, target=str(path))

        return path

    def is_user_owned(self, path: Path | None) -> bool:
        """Return True if ``path`` is an existing, authorizable file.

        Used to decide whether mutating actions are offered for an entry.

        Args:
            path: Entry path, or None for unsaved entries

        Returns:
            True only for an existing regular non-symlink file directly
            inside the trusted directory

        """
        if path is None:
            return False
        try:
            self.authorize(path)
        except (PathTraversalError, UnsafeTargetError):
            return False
        return path.is_file()
