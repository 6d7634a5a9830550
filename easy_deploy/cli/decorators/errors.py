# easy_deploy/cli/decorators/errors.py
"""Error handling decorator for CLI commands"""

import functools
import sys
from typing import Callable

import click

from ...api.exceptions import EasyDeployError, RollbackError
from ..utils.output import err_console, print_error

# Exit codes
EXIT_FAILURE = 1
EXIT_PRECONDITION = 2
EXIT_INTERRUPTED = 130


def handle_errors(func: Callable) -> Callable:
    """
    Report easy-deploy errors on the console and exit non-zero

    Rollback precondition failures exit with status 2, every other
    easy-deploy error with status 1. Unexpected exceptions propagate to
    ``main``, which prints them (with a traceback in debug mode).

    Example:
        @click.command()
        @click.pass_context
        @handle_errors
        def my_command(ctx):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RollbackError as e:
            print_error(str(e))
            sys.exit(EXIT_PRECONDITION)
        except EasyDeployError as e:
            print_error(str(e))
            ctx = click.get_current_context(silent=True)
            if ctx is not None and ctx.obj is not None and getattr(ctx.obj, 'debug', False):
                err_console.print_exception()
            sys.exit(EXIT_FAILURE)

    return wrapper
