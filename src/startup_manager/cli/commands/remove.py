"""Remove command handler."""

from argparse import Namespace

from startup_manager.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class RemoveHandler(BaseCommandHandler):
    """Delete a user entry's file."""

    def execute(self, args: Namespace) -> None:
        """Execute the remove command."""
        entry = self._select(args)
        path = self.service.delete(entry)
        logger.info("✅ Removed %s: %s", entry.name, path)
