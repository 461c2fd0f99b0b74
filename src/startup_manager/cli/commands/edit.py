"""Edit command handler."""

from argparse import Namespace

from startup_manager.exceptions import InvalidOperationError
from startup_manager.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class EditHandler(BaseCommandHandler):
    """Change the name or command of a user entry.

    Options left out keep the entry's current value.
    """

    def execute(self, args: Namespace) -> None:
        """Execute the edit command."""
        if (
            args.name is None
            and args.exec_command is None
            and not args.rename
        ):
            msg = "Nothing to change, pass --name, --command or --rename"
            raise InvalidOperationError(msg, target=args.id)

        entry = self._select(args)
        updated = self.service.edit(
            entry,
            args.name if args.name is not None else entry.name,
            args.exec_command
            if args.exec_command is not None
            else entry.command,
            rename=args.rename,
        )
        logger.info("✅ Saved %s: %s", updated.name, updated.path)
        if updated.path != entry.path and entry.file_name is not None:
            logger.info("   Moved from %s", entry.file_name)
