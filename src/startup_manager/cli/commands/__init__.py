"""Command handlers for the startup-manager CLI."""

from .add import AddHandler
from .base import BaseCommandHandler
from .edit import EditHandler
from .listing import ListHandler
from .remove import RemoveHandler
from .show import ShowHandler
from .toggle import DisableHandler, EnableHandler, ToggleHandler

__all__ = [
    "AddHandler",
    "BaseCommandHandler",
    "DisableHandler",
    "EditHandler",
    "EnableHandler",
    "ListHandler",
    "RemoveHandler",
    "ShowHandler",
    "ToggleHandler",
]
