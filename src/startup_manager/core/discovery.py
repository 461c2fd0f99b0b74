"""Loading of autostart entries from the user and system directories.

A single unreadable or undecodable file is logged and skipped; it never
stops the rest of a directory from loading.
"""

from pathlib import Path

from startup_manager.constants import DESKTOP_FILE_EXTENSION
from startup_manager.core.desktop_entry.parser import load_desktop_file
from startup_manager.domain.entry import EntrySource, StartupEntry
from startup_manager.exceptions import EntryIOError, StartupManagerError
from startup_manager.logger import get_logger

logger = get_logger(__name__)


def list_desktop_files(directory: Path) -> list[Path]:
    """Return ``*.desktop`` files in ``directory`` sorted by name.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        Matching paths, empty if the directory does not exist

    Raises:
        EntryIOError: If the directory exists but cannot be listed

    """
    if not directory.exists():
        logger.debug("Autostart directory not found: %s", directory)
        return []

    try:
        children = list(directory.iterdir())
    except OSError as e:
        msg = f"reading directory failed: {e}"
        raise EntryIOError(msg, target=str(directory)) from e

    return sorted(
        (
            path
            for path in children
            if path.suffix == DESKTOP_FILE_EXTENSION and not path.is_dir()
        ),
        key=lambda path: path.name,
    )


def load_autostart_dir(
    directory: Path, source: EntrySource
) -> list[StartupEntry]:
    """Parse every desktop file in an autostart directory.

    Args:
        directory: Directory to scan
        source: Provenance recorded on each entry

    Returns:
        Parsed entries in file name order

    Raises:
        EntryIOError: If the directory exists but cannot be listed

    """
    entries: list[StartupEntry] = []
    for path in list_desktop_files(directory):
        try:
            entries.append(load_desktop_file(path, source))
        except StartupManagerError as e:
            logger.warning("Skipping %s: %s", path, e)
    logger.debug(
        "Loaded %d %s entries from %s", len(entries), source.label, directory
    )
    return entries


def load_entries(user_dir: Path, system_dir: Path) -> list[StartupEntry]:
    """Load user entries followed by system entries.

    Args:
        user_dir: Writable per-user autostart directory
        system_dir: Read-only system autostart directory

    Returns:
        All entries, user entries first

    """
    entries = load_autostart_dir(user_dir, EntrySource.USER)
    entries.extend(load_autostart_dir(system_dir, EntrySource.SYSTEM))
    return entries
