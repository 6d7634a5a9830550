"""Easy Deploy - promote a built file to a stable path, with history.

Each deploy copies the file into a hidden, id-named slot next to the target,
repoints the target symlink at it and records the deployment, so earlier
versions can be listed and rolled back to.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .api.deployer import Deployer, deploy, rollback, list_deployments

# Data models
from .models import DeploymentRecord, TargetState, DeploymentRow, EasyDeployConfig

# Exceptions
from .api.exceptions import (
    EasyDeployError,
    DeployError,
    StateError,
    StateCorruptedError,
    RollbackError,
    NothingToRollbackError,
    DeploymentNotFoundError,
    ConfigError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Deployer",

    # Core API functions
    "deploy",
    "rollback",
    "list_deployments",

    # Data models
    "DeploymentRecord",
    "TargetState",
    "DeploymentRow",
    "EasyDeployConfig",

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
