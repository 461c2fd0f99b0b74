"""List command handler."""

from argparse import Namespace

from startup_manager.logger import get_logger
from startup_manager.ui.display import display_entry_list, entries_to_json

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ListHandler(BaseCommandHandler):
    """Show the filtered and sorted entry list."""

    def execute(self, args: Namespace) -> None:
        """Execute the list command."""
        entries = self._load_entries()
        visible = self._visible(entries, args)
        logger.debug(
            "Showing %d of %d entries", len(visible), len(entries)
        )

        if getattr(args, "json", False):
            mutable = [self.service.is_mutable(entry) for entry in entries]
            logger.info(entries_to_json(entries, visible, mutable))
            return

        display_entry_list(entries, visible)
