"""Filtering and ordering of loaded entries.

Pure functions over a list of entries. Results are index lists into the
given list so callers keep ownership of the entries and any selection
state.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from startup_manager.domain.entry import EntrySource, StartupEntry


@dataclass(frozen=True)
class FilterState:
    """Which entries to show.

    When both flags of a pair are off the pair does not restrict
    anything, so turning every flag off shows every entry.
    """

    show_enabled: bool = True
    show_disabled: bool = True
    show_user: bool = True
    show_system: bool = True


class SortKey(Enum):
    """Supported list orders."""

    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    STATUS_ENABLED_FIRST = "status_enabled_first"
    SOURCE_USER_FIRST = "source_user_first"
    SOURCE_SYSTEM_FIRST = "source_system_first"

    @classmethod
    def from_name(cls, value: str) -> "SortKey":
        """Look up a sort key by value, case-insensitively.

        Raises:
            ValueError: If ``value`` names no sort key

        """
        normalized = value.strip().lower().replace("-", "_")
        for key in cls:
            if key.value == normalized:
                return key
        valid = ", ".join(key.value for key in cls)
        msg = f"Unknown sort key '{value}' (expected one of: {valid})"
        raise ValueError(msg)


def matches_filter(entry: StartupEntry, filter_state: FilterState) -> bool:
    """Return True if ``entry`` passes ``filter_state``."""
    state_ok = (
        (filter_state.show_enabled and entry.enabled)
        or (filter_state.show_disabled and not entry.enabled)
        or (not filter_state.show_enabled and not filter_state.show_disabled)
    )
    source_ok = (
        (filter_state.show_user and entry.source is EntrySource.USER)
        or (filter_state.show_system and entry.source is EntrySource.SYSTEM)
        or (not filter_state.show_user and not filter_state.show_system)
    )
    return state_ok and source_ok


def apply_filter(
    entries: Sequence[StartupEntry], filter_state: FilterState
) -> list[int]:
    """Return indices of entries passing the filter, in input order."""
    return [
        index
        for index, entry in enumerate(entries)
        if matches_filter(entry, filter_state)
    ]


def _name_key(entry: StartupEntry) -> str:
    # Codepoint order of the lowercased name, no locale collation
    return entry.name.lower()


def sort_indices(
    entries: Sequence[StartupEntry],
    indices: Sequence[int],
    sort_key: SortKey,
) -> list[int]:
    """Order ``indices`` by ``sort_key``.

    Status and source orders break ties by ascending name. Remaining ties
    keep their position in ``indices``.

    Args:
        entries: All loaded entries
        indices: Indices into ``entries`` to order
        sort_key: Requested order

    Returns:
        New list of indices

    """
    positioned = list(enumerate(indices))

    if sort_key is SortKey.NAME_DESC:
        # Descending by name, ascending by original position
        ordered = sorted(
            positioned,
            key=lambda item: (_name_key(entries[item[1]]), -item[0]),
            reverse=True,
        )
        return [index for _, index in ordered]

    def key(item: tuple[int, int]) -> tuple:
        position, index = item
        entry = entries[index]
        name = _name_key(entry)
        if sort_key is SortKey.STATUS_ENABLED_FIRST:
            return (not entry.enabled, name, position)
        if sort_key is SortKey.SOURCE_USER_FIRST:
            return (entry.source is not EntrySource.USER, name, position)
        if sort_key is SortKey.SOURCE_SYSTEM_FIRST:
            return (entry.source is not EntrySource.SYSTEM, name, position)
        return (name, position)

    return [index for _, index in sorted(positioned, key=key)]
