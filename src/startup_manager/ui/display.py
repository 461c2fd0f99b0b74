"""Display functions for CLI output.

Output goes through logger.info so it follows the console handler:
INFO records print as bare lines.
"""

from collections.abc import Sequence
from typing import Any

import orjson

from startup_manager.domain.entry import StartupEntry
from startup_manager.logger import get_logger

logger = get_logger(__name__)

NAME_COLUMN_WIDTH = 28


def entry_to_dict(
    entry: StartupEntry,
    position: int | None = None,
    mutable: bool | None = None,  # noqa: FBT001
) -> dict[str, Any]:
    """Return the JSON-serializable summary of an entry."""
    data: dict[str, Any] = {
        "name": entry.name,
        "command": entry.command,
        "enabled": entry.enabled,
        "source": entry.source.value,
        "path": str(entry.path) if entry.path is not None else None,
    }
    if position is not None:
        data["position"] = position
    if mutable is not None:
        data["mutable"] = mutable
    return data


def format_entry_row(position: int, entry: StartupEntry) -> str:
    """Format one list row: position, status mark, name, source, command."""
    mark = "✓" if entry.enabled else "✗"
    return (
        f"{position:>3}. {mark} {entry.name:<{NAME_COLUMN_WIDTH}} "
        f"[{entry.source.label}] {entry.command}"
    )


def display_entry_list(
    entries: Sequence[StartupEntry], visible: Sequence[int]
) -> None:
    """Print the visible entries, numbered by display position."""
    if not visible:
        logger.info("No entries match the current filter")
        return

    logger.info("🚀 Autostart entries (%d):", len(visible))
    logger.info("")
    for position, index in enumerate(visible, start=1):
        logger.info(format_entry_row(position, entries[index]))


def entries_to_json(
    entries: Sequence[StartupEntry],
    visible: Sequence[int],
    mutable: Sequence[bool] | None = None,
) -> str:
    """Serialize the visible entries as an indented JSON array."""
    rows = [
        entry_to_dict(
            entries[index],
            position=position,
            mutable=mutable[index] if mutable is not None else None,
        )
        for position, index in enumerate(visible, start=1)
    ]
    return orjson.dumps(rows, option=orjson.OPT_INDENT_2).decode("utf-8")


def display_entry_details(
    entry: StartupEntry,
    mutable: bool,  # noqa: FBT001
) -> None:
    """Print every detail of one entry, including preserved keys."""
    logger.info("📦 %s", entry.name)
    logger.info("")
    logger.info("  Command:  %s", entry.command or "(none)")
    logger.info("  Status:   %s", entry.status_label)
    logger.info("  Source:   %s", entry.source.label)
    logger.info("  File:     %s", entry.path or "(not saved)")
    logger.info("  Editable: %s", "yes" if mutable else "no")

    if entry.localized_names:
        logger.info("")
        logger.info("  Localized names:")
        for locale, value in entry.localized_names:
            logger.info("    %-10s %s", locale, value)

    if entry.extra:
        logger.info("")
        logger.info("  Other keys:")
        for key, value in entry.extra:
            logger.info("    %s=%s", key, value)

    if entry.other_groups:
        logger.info("")
        logger.info(
            "  Other sections: %s",
            ", ".join(group[0].strip() for group in entry.other_groups),
        )
