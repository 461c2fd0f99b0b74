"""In-memory model of one autostart desktop entry file.

The model splits a file into fields the application understands and may
change (name, command, enabled flag) and side tables holding everything
else verbatim, so a rewrite keeps comments, unknown keys, localized
names and foreign sections.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from startup_manager.constants import DEFAULT_ENTRY_NAME


class EntrySource(Enum):
    """Where an entry was loaded from."""

    USER = "user"
    SYSTEM = "system"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Short human-readable label."""
        return self.value


@dataclass
class StartupEntry:
    """One autostart entry.

    Attributes:
        name: Display name from the ``Name`` key.
        command: Launch command from the ``Exec`` key, kept opaque.
        enabled: Whether the session should start the entry.
        source: Provenance; only USER entries may be modified.
        path: File the entry was loaded from, None before first write.
        extra: Unrecognized ``[Desktop Entry]`` keys in file order,
            duplicates kept.
        localized_names: ``(locale, value)`` pairs from ``Name[locale]``.
        entry_comments: Comment and blank lines of ``[Desktop Entry]``.
        preamble: Lines before the first section header.
        other_groups: Each non-primary section as raw lines, header
            included.

    """

    name: str = DEFAULT_ENTRY_NAME
    command: str = ""
    enabled: bool = True
    source: EntrySource = EntrySource.OTHER
    path: Path | None = None
    extra: list[tuple[str, str]] = field(default_factory=list)
    localized_names: list[tuple[str, str]] = field(default_factory=list)
    entry_comments: list[str] = field(default_factory=list)
    preamble: list[str] = field(default_factory=list)
    other_groups: list[list[str]] = field(default_factory=list)

    @property
    def status_label(self) -> str:
        """Return "enabled" or "disabled"."""
        return "enabled" if self.enabled else "disabled"

    @property
    def file_name(self) -> str | None:
        """Return the backing file name, if any."""
        return self.path.name if self.path is not None else None
