"""Show command handler."""

from argparse import Namespace

from startup_manager.ui.display import display_entry_details

from .base import BaseCommandHandler


class ShowHandler(BaseCommandHandler):
    """Print the details of one entry."""

    def execute(self, args: Namespace) -> None:
        """Execute the show command."""
        entry = self._select(args)
        display_entry_details(entry, self.service.is_mutable(entry))
