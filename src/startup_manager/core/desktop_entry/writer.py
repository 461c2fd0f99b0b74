"""Desktop entry rendering and atomic persistence.

Rendering always uses one canonical layout: application-controlled keys
are grouped in a fixed order right after the section header and its
comments, followed by every preserved key and section in original
order. Two renders of equal entries are byte-identical.
"""

import os
import tempfile
from pathlib import Path

from startup_manager.constants import (
    DEDICATED_KEYS,
    DESKTOP_FILE_TYPE,
    DESKTOP_SECTION_HEADER,
    ENTRY_TMP_PREFIX,
    ENTRY_TMP_SUFFIX,
    KEY_AUTOSTART_ENABLED,
    KEY_EXEC,
    KEY_HIDDEN,
    KEY_NAME,
    KEY_TYPE,
    LOCALIZED_NAME_PREFIX,
)
from startup_manager.domain.entry import StartupEntry
from startup_manager.exceptions import EntryIOError
from startup_manager.logger import get_logger

logger = get_logger(__name__)


def _bool_value(value: bool) -> str:  # noqa: FBT001
    return "true" if value else "false"


def _is_dedicated_key(key: str) -> bool:
    return key in DEDICATED_KEYS or key.startswith(LOCALIZED_NAME_PREFIX)


def render_lines(entry: StartupEntry) -> list[str]:
    """Build the output lines for an entry, without line terminators.

    Args:
        entry: Entry to render

    Returns:
        Lines in canonical order

    """
    lines: list[str] = list(entry.preamble)
    if entry.preamble and entry.preamble[-1]:
        lines.append("")

    lines.append(DESKTOP_SECTION_HEADER)
    # Comments are hoisted under the header; their position among the
    # key lines is not tracked.
    lines.extend(entry.entry_comments)
    lines.append(f"{KEY_TYPE}={DESKTOP_FILE_TYPE}")
    lines.append(f"{KEY_NAME}={entry.name}")
    lines.extend(
        f"{KEY_NAME}[{locale}]={value}"
        for locale, value in entry.localized_names
    )
    lines.append(f"{KEY_EXEC}={entry.command}")
    lines.append(f"{KEY_AUTOSTART_ENABLED}={_bool_value(entry.enabled)}")
    lines.append(f"{KEY_HIDDEN}={_bool_value(not entry.enabled)}")

    for key, value in entry.extra:
        if _is_dedicated_key(key):
            logger.debug("Dropping extra key owned by a field: %s", key)
            continue
        lines.append(f"{key}={value}")

    if entry.other_groups and lines[-1]:
        lines.append("")
    last_index = len(entry.other_groups) - 1
    for index, group in enumerate(entry.other_groups):
        lines.extend(group)
        if index != last_index and group and group[-1]:
            lines.append("")

    return lines


def render_desktop_entry(entry: StartupEntry) -> str:
    """Render an entry to desktop file text.

    The result always ends with exactly one newline.

    Args:
        entry: Entry to render

    Returns:
        File content

    """
    lines = render_lines(entry)
    content = "\n".join(lines)
    if lines[-1]:
        content += "\n"
    return content


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in one rename.

    The data goes to a temporary file in the same directory, is flushed
    and synced, then renamed over the target. Readers never see a
    partial file and a failure leaves the original untouched.

    Args:
        path: Target file
        content: Text to write (UTF-8)

    Raises:
        EntryIOError: If any step fails

    """
    directory = path.parent
    temp_path: Path | None = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=directory,
            prefix=ENTRY_TMP_PREFIX,
            suffix=ENTRY_TMP_SUFFIX,
            delete=False,
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())

        temp_path.replace(path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        msg = f"writing desktop file failed: {e}"
        raise EntryIOError(msg, target=str(path)) from e


def write_desktop_entry(entry: StartupEntry, path: Path) -> None:
    """Render ``entry`` and atomically write it to ``path``.

    Callers are expected to have authorized ``path`` with PathGuard.

    Args:
        entry: Entry to persist
        path: Target file

    Raises:
        EntryIOError: If writing fails

    """
    atomic_write_text(path, render_desktop_entry(entry))
    logger.debug("Wrote desktop entry %s", path)
