# easy_deploy/cli/decorators/__init__.py
"""CLI decorators"""

from .errors import handle_errors, EXIT_FAILURE, EXIT_PRECONDITION, EXIT_INTERRUPTED

__all__ = [
    'handle_errors',
    'EXIT_FAILURE',
    'EXIT_PRECONDITION',
    'EXIT_INTERRUPTED',
]
