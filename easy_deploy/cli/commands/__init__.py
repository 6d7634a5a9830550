# easy_deploy/cli/commands/__init__.py
"""CLI commands"""

from . import deploy
from . import rollback
from . import history

__all__ = [
    "deploy",
    "rollback",
    "history",
]
