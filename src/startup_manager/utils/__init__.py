"""Utility helpers for startup-manager."""

from startup_manager.utils.utils import entry_file_name, slugify

__all__ = ["entry_file_name", "slugify"]
