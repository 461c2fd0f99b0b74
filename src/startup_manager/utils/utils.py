"""Utility functions for startup-manager."""

import re

from startup_manager.constants import DEFAULT_SLUG, DESKTOP_FILE_EXTENSION


def slugify(name: str) -> str:
    """Derive a file name stem from an entry name.

    ASCII letters and digits are kept and lowercased, each run of
    whitespace, hyphens and underscores becomes a single hyphen, and
    every other character is dropped. Leading and trailing hyphens are
    kept.

    Args:
        name: Display name of the entry

    Returns:
        Slug such as ``my-app``, or ``entry`` if nothing usable remains

    Example:
        >>> slugify("My App")
        'my-app'
        >>> slugify("$$$")
        'entry'

    """
    # ASCII only; non-ASCII letters are dropped before lowercasing
    kept = re.sub(r"[^A-Za-z0-9\s_-]", "", name).lower()
    slug = re.sub(r"[\s_-]+", "-", kept)
    return slug or DEFAULT_SLUG


def entry_file_name(name: str) -> str:
    """Return the ``.desktop`` file name for an entry name."""
    return f"{slugify(name)}{DESKTOP_FILE_EXTENSION}"
