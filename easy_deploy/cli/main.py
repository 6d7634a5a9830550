# easy_deploy/cli/main.py
"""Main CLI entry point for easy-deploy"""

import logging
import os
import sys
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..api.deployer import Deployer
from ..constants import APP_NAME, ENV_LOG_LEVEL, LOG_FORMAT
from .decorators import EXIT_FAILURE, EXIT_INTERRUPTED
from .utils.output import err_console

# Import all commands
from .commands import (
    deploy,
    rollback,
    history,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(os.environ.get(ENV_LOG_LEVEL, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=err_console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True,
    )


class Context:
    """CLI context object with lazy deployer initialization

    Configuration is only read when a command actually needs the
    deployer, so ``--help`` works even with a broken config file.
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize CLI context"""
        self.config_path = config_path
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False
        self._deployer: Optional[Deployer] = None

    @property
    def deployer(self) -> Deployer:
        """Get deployer instance (lazy loading)

        Raises:
            ConfigError: If the configuration is invalid
        """
        if self._deployer is None:
            self._deployer = Deployer(config_path=self.config_path)
        return self._deployer


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Configuration file (default: ~/.config/easy-deploy/config.yaml)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Easy Deploy - promote a built file to a stable path

    Every deploy keeps a numbered hidden copy next to the target and
    repoints the target symlink at it, so earlier versions can be listed
    and rolled back to.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.quiet = quiet


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(rollback.rollback)
cli.add_command(history.list_deployments)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(EXIT_INTERRUPTED)

    except Exception as e:
        err_console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            err_console.print_exception()
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
