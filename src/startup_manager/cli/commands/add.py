"""Add command handler."""

from argparse import Namespace

from startup_manager.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class AddHandler(BaseCommandHandler):
    """Create a new enabled user entry."""

    def execute(self, args: Namespace) -> None:
        """Execute the add command."""
        entry = self.service.create(args.name, args.exec_command)
        logger.info("✅ Added %s: %s", entry.name, entry.path)
