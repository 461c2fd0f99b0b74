"""User autostart entry mutations.

Every operation checks provenance, then authorizes the target path with
PathGuard, and only then touches disk. Entries passed in are never
modified: each operation returns the new entry value, so a failed write
leaves both the caller's state and the file unchanged.
"""

import dataclasses
from collections.abc import Sequence
from pathlib import Path

from startup_manager.core.desktop_entry.writer import write_desktop_entry
from startup_manager.core.path_guard import PathGuard
from startup_manager.domain.entry import EntrySource, StartupEntry
from startup_manager.exceptions import (
    EntryIOError,
    InvalidOperationError,
    SelectionError,
    StartupManagerError,
)
from startup_manager.logger import get_logger
from startup_manager.utils.utils import entry_file_name

logger = get_logger(__name__)


def _require_text(name: str, command: str) -> None:
    if not name.strip() or not command.strip():
        msg = "Name and command are required"
        raise InvalidOperationError(msg)


class EntryService:
    """Create, edit, toggle and delete entries in the user directory."""

    def __init__(self, user_dir: Path, guard: PathGuard | None = None) -> None:
        """Initialize the service.

        Args:
            user_dir: Trusted per-user autostart directory
            guard: Path guard, defaults to one trusting ``user_dir``

        """
        self.user_dir = user_dir
        self.guard = guard or PathGuard(user_dir)

    def default_path(self, name: str) -> Path:
        """Return the file path a new entry called ``name`` would get."""
        return self.user_dir / entry_file_name(name)

    def is_mutable(self, entry: StartupEntry) -> bool:
        """Return True if toggle, edit and delete are allowed."""
        return entry.source is EntrySource.USER and self.guard.is_user_owned(
            entry.path
        )

    def _require_user(self, entry: StartupEntry, action: str) -> None:
        if entry.source is not EntrySource.USER:
            msg = f"Only user autostart entries can be {action}"
            raise InvalidOperationError(msg, target=entry.name)

    def set_enabled(
        self,
        entry: StartupEntry,
        enabled: bool,  # noqa: FBT001
    ) -> StartupEntry:
        """Write ``entry`` with the given enabled state.

        Args:
            entry: User entry to change
            enabled: New state

        Returns:
            Updated entry

        Raises:
            InvalidOperationError: If the entry is not a user entry
            PathGuardError: If the target path is not allowed
            EntryIOError: If writing fails

        """
        self._require_user(entry, "toggled")
        path = self.guard.authorize(
            entry.path or self.default_path(entry.name)
        )
        updated = dataclasses.replace(entry, enabled=enabled, path=path)
        write_desktop_entry(updated, path)
        logger.debug(
            "%s %s", "Enabled" if enabled else "Disabled", updated.name
        )
        return updated

    def toggle(self, entry: StartupEntry) -> StartupEntry:
        """Flip the enabled state of a user entry."""
        return self.set_enabled(entry, not entry.enabled)

    def delete(self, entry: StartupEntry) -> Path:
        """Remove a user entry's file.

        Args:
            entry: User entry to delete

        Returns:
            The removed path

        Raises:
            InvalidOperationError: If the entry is not a user entry or
                has no file
            PathGuardError: If the path is not allowed
            EntryIOError: If removal fails

        """
        self._require_user(entry, "deleted")
        if entry.path is None:
            msg = "Entry has no associated file path"
            raise InvalidOperationError(msg, target=entry.name)

        path = self.guard.authorize(entry.path)
        try:
            path.unlink()
        except OSError as e:
            msg = f"removing file failed: {e}"
            raise EntryIOError(msg, target=str(path)) from e
        logger.debug("Deleted entry %s", entry.name)
        return path

    def create(self, name: str, command: str) -> StartupEntry:
        """Create a new enabled user entry.

        Args:
            name: Display name
            command: Launch command

        Returns:
            The written entry

        Raises:
            InvalidOperationError: If name or command is blank, or a file
                for this name already exists
            PathGuardError: If the derived path is not allowed
            EntryIOError: If the directory or file cannot be written

        """
        _require_text(name, command)
        try:
            self.user_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"creating directory failed: {e}"
            raise EntryIOError(msg, target=str(self.user_dir)) from e

        path = self.guard.authorize(self.default_path(name))
        if path.exists():
            msg = f"An entry file named {path.name} already exists"
            raise InvalidOperationError(msg, target=name)

        entry = StartupEntry(
            name=name,
            command=command,
            enabled=True,
            source=EntrySource.USER,
            path=path,
        )
        write_desktop_entry(entry, path)
        logger.debug("Added entry %s (%s)", name, path.name)
        return entry

    def edit(
        self,
        entry: StartupEntry,
        name: str,
        command: str,
        *,
        rename: bool = False,
    ) -> StartupEntry:
        """Change the name and command of a user entry.

        The entry keeps its file unless ``rename`` is set or it has none,
        in which case the file name is derived from the new name and the
        old file is removed after the new one is written.

        Args:
            entry: User entry to edit
            name: New display name
            command: New launch command
            rename: Move the entry to the file derived from ``name``

        Returns:
            Updated entry, with a new ``path`` when the file moved

        Raises:
            InvalidOperationError: If the entry is not a user entry or
                name or command is blank
            PathGuardError: If the target path is not allowed
            EntryIOError: If writing fails

        """
        self._require_user(entry, "edited")
        _require_text(name, command)

        original_path = entry.path
        if original_path is None or rename:
            target = self.default_path(name)
        else:
            target = original_path
        target = self.guard.authorize(target)

        if target != original_path and target.exists():
            msg = f"An entry file named {target.name} already exists"
            raise InvalidOperationError(msg, target=name)

        updated = dataclasses.replace(
            entry, name=name, command=command, path=target
        )
        write_desktop_entry(updated, target)
        logger.debug("Saved entry %s", name)

        if original_path is not None and target != original_path:
            self._remove_stale(original_path)
        return updated

    def _remove_stale(self, path: Path) -> None:
        """Remove the file an edited entry moved away from."""
        try:
            self.guard.authorize(path).unlink(missing_ok=True)
        except (StartupManagerError, OSError) as e:
            logger.warning("Could not remove old entry file %s: %s", path, e)
        else:
            logger.debug("Removed old entry file %s", path)


def select_entry(
    entries: Sequence[StartupEntry],
    visible: Sequence[int],
    identifier: str,
) -> int:
    """Resolve a user-supplied identifier to an entry index.

    ``identifier`` may be a 1-based position in ``visible``, a file name
    (with or without ``.desktop``) or an entry name (case-insensitive).
    File names take precedence over display names.

    Args:
        entries: All loaded entries
        visible: Indices currently shown, in display order
        identifier: Position, file name or name

    Returns:
        Index into ``entries``

    Raises:
        SelectionError: If nothing matches, the position is out of
            range, or several entries match

    """
    identifier = identifier.strip()
    if not identifier:
        msg = "No entry selected"
        raise SelectionError(msg)

    if identifier.isdigit():
        position = int(identifier)
        if 1 <= position <= len(visible):
            return visible[position - 1]
        msg = f"No entry at position {position}"
        raise SelectionError(msg, target=identifier)

    by_file = [
        index
        for index in visible
        if (path := entries[index].path) is not None
        and identifier in (path.name, path.stem)
    ]
    by_name = [
        index
        for index in visible
        if entries[index].name.casefold() == identifier.casefold()
    ]
    for candidates in (by_file, by_name):
        if len(candidates) == 1:
            return candidates[0]
        if len(candidates) > 1:
            where = ", ".join(
                str(entries[index].path or entries[index].name)
                for index in candidates
            )
            msg = f"Ambiguous selection, matches: {where}"
            raise SelectionError(msg, target=identifier)

    msg = "No matching entry"
    raise SelectionError(msg, target=identifier)
