"""Top-level package for startup-manager.

Lists, toggles, creates, edits and removes XDG autostart entries.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("startup-manager")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
