"""Deployer API for deployment operations"""

from pathlib import Path
from typing import List, Optional, Union

from ..core.wall_clock import WallClock
from ..models import DeploymentRow, EasyDeployConfig, TargetState
from ..services.config_service import load_config
from ..services.deploy_service import DeployService

PathLike = Union[str, Path]


class Deployer:
    """Deployer class for deployment operations"""

    def __init__(self,
                 config: Optional[EasyDeployConfig] = None,
                 clock: Optional[WallClock] = None,
                 config_path: Optional[PathLike] = None):
        """
        Initialize deployer

        Args:
            config: Engine configuration (resolved from file and environment if omitted)
            clock: Time source (system clock if omitted)
            config_path: Configuration file to read when ``config`` is omitted
        """
        if config is None:
            config = load_config(config_path)
        self.config = config
        self.service = DeployService(clock=clock, config=config)

    def deploy(self,
               source: PathLike,
               target: PathLike,
               message: str = "") -> TargetState:
        """
        Deploy a file to a target

        Args:
            source: File to deploy
            target: Stable target path
            message: Deployment message

        Returns:
            TargetState: State after deployment

        Raises:
            DeployError: If deployment fails
            StateError: If the state file is unreadable or corrupted
        """
        return self.service.deploy(source, target, message)

    def rollback(self,
                 target: PathLike,
                 message: str = "",
                 rollback_id: Optional[int] = None) -> TargetState:
        """
        Rollback a target to an earlier deployment

        Args:
            target: Stable target path
            message: Rollback message
            rollback_id: Deployment to restore (previous one if omitted)

        Returns:
            TargetState: State after rollback

        Raises:
            RollbackError: If there is nothing to roll back to
            DeployError: If redeployment fails
        """
        return self.service.rollback(target, message, rollback_id)

    def list_deployments(self, target: PathLike) -> List[DeploymentRow]:
        """
        List retained deployments of a target, newest first

        Args:
            target: Stable target path

        Returns:
            List[DeploymentRow]: Deployment history
        """
        return self.service.list_deployments(target)


def deploy(source: PathLike, target: PathLike, message: str = "") -> None:
    """
    Deploy a file to a target

    This is a convenience function that creates a Deployer instance
    and performs the deployment.
    """
    Deployer().deploy(source, target, message)


def rollback(target: PathLike,
             message: str = "",
             rollback_id: Optional[int] = None) -> None:
    """
    Rollback a target to an earlier deployment

    This is a convenience function that creates a Deployer instance
    and performs the rollback.
    """
    Deployer().rollback(target, message, rollback_id)


def list_deployments(target: PathLike) -> List[DeploymentRow]:
    """
    List deployments of a target, newest first
    """
    return Deployer().list_deployments(target)
