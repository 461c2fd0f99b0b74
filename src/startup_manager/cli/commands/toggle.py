"""Enable, disable and toggle command handlers."""

from argparse import Namespace

from startup_manager.domain.entry import StartupEntry
from startup_manager.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ToggleHandler(BaseCommandHandler):
    """Flip the enabled state of a user entry."""

    def target_state(self, entry: StartupEntry) -> bool:
        """Return the enabled state the entry should end up in."""
        return not entry.enabled

    def execute(self, args: Namespace) -> None:
        """Execute the command."""
        entry = self._select(args)
        enabled = self.target_state(entry)
        if entry.enabled == enabled:
            logger.info("%s is already %s", entry.name, entry.status_label)
            return

        updated = self.service.set_enabled(entry, enabled)
        logger.info(
            "✅ %s %s", updated.status_label.capitalize(), updated.name
        )


class EnableHandler(ToggleHandler):
    """Enable a user entry."""

    def target_state(self, entry: StartupEntry) -> bool:
        """Return True."""
        return True


class DisableHandler(ToggleHandler):
    """Disable a user entry."""

    def target_state(self, entry: StartupEntry) -> bool:
        """Return False."""
        return False
