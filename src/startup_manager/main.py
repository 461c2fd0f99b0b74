"""Main CLI entry point for startup-manager.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner and command
handlers.
"""

import sys

from startup_manager.cli import CLIRunner
from startup_manager.exceptions import StartupManagerError
from startup_manager.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status."""
    logger.debug("CLI started")
    try:
        runner = CLIRunner()
        status = runner.run()
    except KeyboardInterrupt:
        logger.debug("CLI cancelled by user")
        print("\n⏹️  Operation cancelled by user")
        sys.exit(1)
    except StartupManagerError as e:
        print(f"❌ {e}")
        sys.exit(1)
    logger.debug("CLI finished with status %d", status)
    sys.exit(status)


if __name__ == "__main__":
    main()
