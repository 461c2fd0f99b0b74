"""CLI runner for startup-manager.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

from argparse import Namespace
from collections.abc import Sequence

from startup_manager import __version__
from startup_manager.config import GlobalConfigManager
from startup_manager.exceptions import StartupManagerError
from startup_manager.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)

from .commands import (
    AddHandler,
    BaseCommandHandler,
    DisableHandler,
    EditHandler,
    EnableHandler,
    ListHandler,
    RemoveHandler,
    ShowHandler,
    ToggleHandler,
)
from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self, config_manager: GlobalConfigManager | None = None
    ) -> None:
        """Load configuration, apply log levels and build handlers.

        Args:
            config_manager: Settings manager, defaults to the one for
                the standard configuration directory

        """
        self.config_manager = config_manager or GlobalConfigManager()
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config(self.global_config)
        self._init_command_handlers()

    def _init_command_handlers(self) -> None:
        handler_classes: dict[str, type[BaseCommandHandler]] = {
            "list": ListHandler,
            "show": ShowHandler,
            "enable": EnableHandler,
            "disable": DisableHandler,
            "toggle": ToggleHandler,
            "add": AddHandler,
            "edit": EditHandler,
            "remove": RemoveHandler,
        }
        self.command_handlers: dict[str, BaseCommandHandler] = {
            command: handler_class(self.config_manager, self.global_config)
            for command, handler_class in handler_classes.items()
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Parses arguments, handles global flags and routes to the
        command handler.

        Args:
            argv: Arguments to parse, defaults to ``sys.argv[1:]``

        Returns:
            Process exit status: 0 on success, 1 on any reported error

        """
        parser = CLIParser(self.global_config)
        args = parser.parse_args(argv)

        if args.version:
            print(__version__)
            return 0

        if not args.command:
            print("❌ No command specified. Use --help.")
            return 1

        if args.verbose:
            set_console_level("DEBUG")

        try:
            self._execute_command(args)
        except StartupManagerError as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(f"❌ {e}")
            return 1
        return 0

    def _execute_command(self, args: Namespace) -> None:
        """Execute the specified command with the appropriate handler."""
        handler = self.command_handlers[args.command]
        logger.debug("Running %s", args.command)
        handler.execute(args)
