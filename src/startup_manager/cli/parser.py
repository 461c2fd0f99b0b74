"""CLI argument parser for startup-manager.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from startup_manager.core.collection import SortKey
from startup_manager.domain.types import GlobalConfig

ID_HELP = (
    "Entry position in the default list, file name (with or without "
    ".desktop) or entry name"
)


class CLIParser:
    """Command-line argument parser for startup-manager."""

    def __init__(self, global_config: GlobalConfig) -> None:
        """Initialize the CLI parser with global configuration.

        Args:
            global_config: Loaded global configuration, used for help
                text defaults.

        """
        self.global_config = global_config

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse, defaults to ``sys.argv[1:]``

        Returns:
            Parsed arguments namespace

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="startup-manager",
            description="Manage XDG autostart entries",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Show entries (defaults from the [view] section of settings.conf)
  %(prog)s list
  %(prog)s list --disabled --user --sort status_enabled_first
  %(prog)s list --json

  # Change user entries by position, file name or name
  %(prog)s disable 2
  %(prog)s enable syncthing.desktop
  %(prog)s toggle "Sync Daemon"

  # Create, edit and remove user entries
  %(prog)s add "Sync Daemon" "syncthing serve --no-browser"
  %(prog)s edit sync-daemon --command "syncthing serve" --rename
  %(prog)s remove sync-daemon
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add --version and --verbose to the main parser."""
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show startup-manager version and exit",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on the console",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_list_command(subparsers)
        self._add_show_command(subparsers)
        self._add_state_commands(subparsers)
        self._add_add_command(subparsers)
        self._add_edit_command(subparsers)
        self._add_remove_command(subparsers)

    def _add_list_command(self, subparsers) -> None:
        """Add list command parser.

        Filter flags of a pair combine; giving none of a pair falls back
        to the configured defaults for that pair.
        """
        view = self.global_config["view"]
        list_parser = subparsers.add_parser(
            "list",
            help="List autostart entries",
            epilog=f"""
Default sort: {view["sort"]}
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        list_parser.add_argument(
            "--enabled",
            action="store_true",
            help="Show enabled entries",
        )
        list_parser.add_argument(
            "--disabled",
            action="store_true",
            help="Show disabled entries",
        )
        list_parser.add_argument(
            "--user",
            action="store_true",
            help="Show entries from the user autostart directory",
        )
        list_parser.add_argument(
            "--system",
            action="store_true",
            help="Show entries from the system autostart directory",
        )
        list_parser.add_argument(
            "--sort",
            choices=[key.value for key in SortKey],
            default=None,
            help="Sort order (default from settings)",
        )
        list_parser.add_argument(
            "--json",
            action="store_true",
            help="Print entries as JSON",
        )

    def _add_show_command(self, subparsers) -> None:
        show_parser = subparsers.add_parser(
            "show", help="Show every detail of one entry"
        )
        show_parser.add_argument("id", help=ID_HELP)

    def _add_state_commands(self, subparsers) -> None:
        """Add enable, disable and toggle, which share one signature."""
        for command, help_text in (
            ("enable", "Enable a user entry"),
            ("disable", "Disable a user entry"),
            ("toggle", "Flip the enabled state of a user entry"),
        ):
            state_parser = subparsers.add_parser(command, help=help_text)
            state_parser.add_argument("id", help=ID_HELP)

    def _add_add_command(self, subparsers) -> None:
        add_parser = subparsers.add_parser(
            "add",
            help="Create an enabled user entry",
            epilog="""
Examples:
  %(prog)s "Sync Daemon" "syncthing serve --no-browser"
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        add_parser.add_argument("name", help="Display name")
        add_parser.add_argument(
            "exec_command", metavar="command", help="Launch command"
        )

    def _add_edit_command(self, subparsers) -> None:
        edit_parser = subparsers.add_parser(
            "edit",
            help="Change the name or command of a user entry",
        )
        edit_parser.add_argument("id", help=ID_HELP)
        edit_parser.add_argument("--name", help="New display name")
        edit_parser.add_argument(
            "--command",
            dest="exec_command",
            help="New launch command",
        )
        edit_parser.add_argument(
            "--rename",
            action="store_true",
            help="Move the entry to the file name derived from its name",
        )

    def _add_remove_command(self, subparsers) -> None:
        remove_parser = subparsers.add_parser(
            "remove", help="Delete a user entry's file"
        )
        remove_parser.add_argument("id", help=ID_HELP)
