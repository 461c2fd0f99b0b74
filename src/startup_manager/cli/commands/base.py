"""Base command handler for startup-manager CLI commands.

This module provides the abstract base class that all command handlers
inherit from, along with the entry loading, filtering and selection
shared by every command.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from startup_manager.config import GlobalConfigManager
from startup_manager.core.collection import (
    FilterState,
    SortKey,
    apply_filter,
    sort_indices,
)
from startup_manager.core.discovery import load_entries
from startup_manager.core.entries import EntryService, select_entry
from startup_manager.domain.entry import StartupEntry
from startup_manager.domain.types import GlobalConfig
from startup_manager.logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    Usage:
        config = GlobalConfigManager()
        handler = ConcreteHandler(config)
        handler.execute(args)

    Note:
        Concrete handlers must implement the execute() method.
        CLIRunner creates the shared config and injects it.
    """

    def __init__(
        self,
        config_manager: GlobalConfigManager,
        global_config: GlobalConfig | None = None,
        service: EntryService | None = None,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            config_manager: Settings manager
            global_config: Already loaded settings, loaded on demand
                when omitted
            service: Entry service, defaults to one for the configured
                user autostart directory

        """
        self.config_manager = config_manager
        self.global_config = (
            global_config or config_manager.load_global_config()
        )
        directory = self.global_config["directory"]
        self.user_dir = directory["user_autostart"]
        self.system_dir = directory["system_autostart"]
        self.service = service or EntryService(self.user_dir)

    @abstractmethod
    def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        Raises:
            StartupManagerError: On any failure reported to the user

        """

    def _load_entries(self) -> list[StartupEntry]:
        return load_entries(self.user_dir, self.system_dir)

    def _filter_state(self, args: Namespace) -> FilterState:
        """Combine filter flags with the configured defaults.

        A pair of flags given on the command line replaces the
        configured values for that pair only.
        """
        view = self.global_config["view"]
        show_enabled = getattr(args, "enabled", False)
        show_disabled = getattr(args, "disabled", False)
        if not (show_enabled or show_disabled):
            show_enabled = view["show_enabled"]
            show_disabled = view["show_disabled"]

        show_user = getattr(args, "user", False)
        show_system = getattr(args, "system", False)
        if not (show_user or show_system):
            show_user = view["show_user"]
            show_system = view["show_system"]

        return FilterState(
            show_enabled=show_enabled,
            show_disabled=show_disabled,
            show_user=show_user,
            show_system=show_system,
        )

    def _sort_key(self, args: Namespace) -> SortKey:
        return SortKey.from_name(
            getattr(args, "sort", None) or self.global_config["view"]["sort"]
        )

    def _visible(
        self, entries: list[StartupEntry], args: Namespace
    ) -> list[int]:
        """Return indices of the entries to show, in display order."""
        indices = apply_filter(entries, self._filter_state(args))
        return sort_indices(entries, indices, self._sort_key(args))

    def _select(self, args: Namespace) -> StartupEntry:
        """Load entries and resolve ``args.id`` against the default view.

        Raises:
            SelectionError: If the identifier matches no entry or
                several entries

        """
        entries = self._load_entries()
        index = select_entry(entries, self._visible(entries, args), args.id)
        logger.debug("Selected %s", entries[index].path or entries[index].name)
        return entries[index]
