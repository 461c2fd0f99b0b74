"""Desktop entry parsing and writing."""

from startup_manager.core.desktop_entry.parser import (
    load_desktop_file,
    parse_desktop_entry,
)
from startup_manager.core.desktop_entry.writer import (
    atomic_write_text,
    render_desktop_entry,
    write_desktop_entry,
)

__all__ = [
    "atomic_write_text",
    "load_desktop_file",
    "parse_desktop_entry",
    "render_desktop_entry",
    "write_desktop_entry",
]
