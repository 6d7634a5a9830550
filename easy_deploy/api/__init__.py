# easy_deploy/api/__init__.py
"""API layer for easy-deploy"""

from .exceptions import (
    EasyDeployError,
    DeployError,
    StateError,
    StateCorruptedError,
    RollbackError,
    NothingToRollbackError,
    DeploymentNotFoundError,
    ConfigError,
)
from .deployer import Deployer, deploy, rollback, list_deployments

__all__ = [
    # Main classes
    "Deployer",

    # Convenience functions
    "deploy",
    "rollback",
    "list_deployments",

    # Exceptions
    "EasyDeployError",
    "DeployError",
    "StateError",
    "StateCorruptedError",
    "RollbackError",
    "NothingToRollbackError",
    "DeploymentNotFoundError",
    "ConfigError",
]
