"""Fidelity-preserving desktop entry parser.

A single forward scan splits the file into the fields StartupEntry gives
dedicated attributes to and raw fragments that are written back
untouched: the preamble, comments inside ``[Desktop Entry]``, unknown
keys, localized names and every other section.

Trailing blank lines of a section (and of the preamble) are separators,
not content. The writer regenerates them, so they are not stored; this
keeps repeated load and save cycles from piling up blank lines.
"""

from pathlib import Path

from startup_manager.constants import (
    DEFAULT_ENTRY_NAME,
    DESKTOP_COMMENT_PREFIX,
    DESKTOP_SECTION_NAME,
    KEY_AUTOSTART_ENABLED,
    KEY_EXEC,
    KEY_HIDDEN,
    KEY_NAME,
    KEY_TYPE,
    LOCALIZED_NAME_PREFIX,
)
from startup_manager.domain.entry import EntrySource, StartupEntry
from startup_manager.exceptions import EntryIOError, MalformedEntryError
from startup_manager.logger import get_logger

logger = get_logger(__name__)


def section_name(line: str) -> str | None:
    """Return the section name if ``line`` is a section header.

    Args:
        line: Raw line from the file

    Returns:
        Bracket-stripped section name, or None for any other line

    """
    stripped = line.strip()
    if stripped.startswith("[") and stripped.endswith("]"):
        # All surrounding brackets go: [[Desktop Entry]] is primary too
        return stripped.strip("[]")
    return None


def split_lines(content: str) -> list[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    Other Unicode line boundaries (form feed, U+2028 and so on) stay
    inside the line they appear in.
    """
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def _drop_trailing_blanks(lines: list[str]) -> list[str]:
    end = len(lines)
    while end and not lines[end - 1].strip():
        end -= 1
    return lines[:end]


class _EntryBuilder:
    """Mutable scan state for one parse run."""

    def __init__(self) -> None:
        self.name = DEFAULT_ENTRY_NAME
        self.command = ""
        self.enabled = True
        self.extra: list[tuple[str, str]] = []
        self.localized_names: list[tuple[str, str]] = []
        self.entry_comments: list[str] = []
        self.preamble: list[str] = []
        self.other_groups: list[list[str]] = []

        # None until the first header is seen
        self.current_section: str | None = None
        self.block: list[str] = []
        self.pending_blanks: list[str] = []

    @property
    def in_primary(self) -> bool:
        return self.current_section == DESKTOP_SECTION_NAME

    def close_section(self) -> None:
        """Flush whatever the open section buffered."""
        if self.current_section is None:
            self.preamble.extend(_drop_trailing_blanks(self.block))
        elif not self.in_primary:
            block = _drop_trailing_blanks(self.block)
            if block:
                self.other_groups.append(block)
        self.block = []
        self.pending_blanks = []

    def open_section(self, name: str, raw_line: str) -> None:
        self.close_section()
        self.current_section = name
        if not self.in_primary:
            self.block.append(raw_line)

    def primary_line(self, raw_line: str) -> None:
        stripped = raw_line.strip()
        if not stripped:
            # Held back until we know the section continues
            self.pending_blanks.append(raw_line)
            return

        self.entry_comments.extend(self.pending_blanks)
        self.pending_blanks = []

        if stripped.startswith(DESKTOP_COMMENT_PREFIX):
            self.entry_comments.append(raw_line)
            return

        key, sep, value = raw_line.partition("=")
        if not sep:
            logger.debug("Skipping line without '=': %r", raw_line)
            return
        self.assign(key.strip(), value.strip())

    def assign(self, key: str, value: str) -> None:
        if key == KEY_NAME:
            self.name = value
        elif key.startswith(LOCALIZED_NAME_PREFIX):
            locale = key[len(LOCALIZED_NAME_PREFIX) :]
            if locale.endswith("]"):
                self.localized_names.append((locale[:-1], value))
            else:
                logger.debug("Dropping malformed localized key: %s", key)
        elif key == KEY_EXEC:
            self.command = value
        elif key == KEY_HIDDEN:
            self.enabled = value != "true"
        elif key == KEY_AUTOSTART_ENABLED:
            self.enabled = value == "true"
        elif key == KEY_TYPE:
            # Always written back as Application
            logger.debug("Ignoring type marker: %s", value)
        else:
            self.extra.append((key, value))

    def build(self, source: EntrySource, path: Path | None) -> StartupEntry:
        return StartupEntry(
            name=self.name,
            command=self.command,
            enabled=self.enabled,
            source=source,
            path=path,
            extra=self.extra,
            localized_names=self.localized_names,
            entry_comments=self.entry_comments,
            preamble=self.preamble,
            other_groups=self.other_groups,
        )


def parse_desktop_entry(
    content: str,
    source: EntrySource = EntrySource.OTHER,
    path: Path | None = None,
) -> StartupEntry:
    """Parse desktop entry text into a StartupEntry.

    Never fails on content: lines without ``=`` are skipped and unknown
    keys are preserved. When both ``Hidden`` and
    ``X-GNOME-Autostart-enabled`` appear, the later one decides
    ``enabled``. A repeated ``[Desktop Entry]`` section keeps assigning
    the same fields.

    Args:
        content: Full file text
        source: Provenance to record on the entry
        path: File the text came from, if any

    Returns:
        Parsed entry

    """
    builder = _EntryBuilder()
    for raw_line in split_lines(content):
        name = section_name(raw_line)
        if name is not None:
            builder.open_section(name, raw_line)
        elif builder.current_section is None:
            builder.block.append(raw_line)
        elif builder.in_primary:
            builder.primary_line(raw_line)
        else:
            builder.block.append(raw_line)
    builder.close_section()
    return builder.build(source, path)


def load_desktop_file(path: Path, source: EntrySource) -> StartupEntry:
    """Read and parse a desktop entry file.

    Args:
        path: File to read
        source: Provenance to record on the entry

    Returns:
        Parsed entry with ``path`` set

    Raises:
        EntryIOError: If the file cannot be read
        MalformedEntryError: If the file is not valid UTF-8

    """
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"not valid UTF-8 text: {e}"
        raise MalformedEntryError(msg, target=str(path)) from e
    except OSError as e:
        msg = f"reading desktop file failed: {e}"
        raise EntryIOError(msg, target=str(path)) from e

    entry = parse_desktop_entry(content, source=source, path=path)
    logger.debug("Parsed %s (%s)", path, entry.name)
    return entry
