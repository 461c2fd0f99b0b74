"""CLI presentation helpers."""

from startup_manager.ui.display import (
    display_entry_details,
    display_entry_list,
    entries_to_json,
    entry_to_dict,
    format_entry_row,
)

__all__ = [
    "display_entry_details",
    "display_entry_list",
    "entries_to_json",
    "entry_to_dict",
    "format_entry_row",
]
