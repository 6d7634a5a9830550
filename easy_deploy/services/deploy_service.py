"""Deploy service: promote files to targets, roll back and collect garbage"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..api.exceptions import (
    DeployError,
    DeploymentNotFoundError,
    NothingToRollbackError,
)
from ..constants import ErrorCode
from ..core.path_resolver import get_hidden_target
from ..core.state_store import dump_state, load_state
from ..core.wall_clock import SystemClock, WallClock
from ..models.config import EasyDeployConfig
from ..models.result import DeploymentRow
from ..models.state import (
    DeploymentAdded,
    TargetState,
    apply_deployment,
    garbage_collect,
)
from ..utils.file_utils import copy_file, path_exists, remove_if_exists

PathLike = Union[str, Path]


class DeployService:
    """Service for deploying files behind a stable symlink

    Every deploy follows the same order: the file is copied into its hidden
    slot, the target symlink is repointed, and only then is the state file
    written. Hidden copies evicted by garbage collection are deleted last,
    once the saved state no longer references them.

    There is no locking: two processes deploying the same target at the
    same time race on the symlink and the state file.
    """

    def __init__(self,
                 clock: Optional[WallClock] = None,
                 config: Optional[EasyDeployConfig] = None):
        """Initialize deploy service

        Args:
            clock: Time source for deployment timestamps
            config: Engine configuration
        """
        self.clock = clock or SystemClock()
        self.config = config or EasyDeployConfig()
        self.logger = logging.getLogger(self.__class__.__name__)

    def deploy(self,
               source: PathLike,
               target: PathLike,
               message: str = "",
               original_id: Optional[int] = None) -> TargetState:
        """Deploy ``source`` to ``target``

        Args:
            source: File to deploy
            target: Stable path that will point at the deployed copy
            message: Free-text annotation
            original_id: Deployment whose content is being restored, if any

        Returns:
            The persisted state after the deployment

        Raises:
            DeployError: If copying, relinking or strict cleanup fails
            StateError: If the state file cannot be read or written
        """
        source = Path(source)
        target = Path(target)

        state = load_state(target)
        now = self.clock.now()

        state = self._promote(state, source, now, message, original_id)

        collection = garbage_collect(state, self.config.max_versions_to_keep)
        dump_state(collection.state)

        self.logger.info(
            f"Deployed {source} to {target} as #{collection.state.current}"
        )

        if collection.evicted_ids:
            self._remove_evicted(target, collection.evicted_ids)

        return collection.state

    def rollback(self,
                 target: PathLike,
                 message: str = "",
                 rollback_id: Optional[int] = None) -> TargetState:
        """Redeploy an earlier deployment of ``target``

        The restored content gets a new deployment id; its record points
        back at ``rollback_id`` through ``original_id``.

        Args:
            target: Stable target path
            message: Free-text annotation
            rollback_id: Deployment to restore (defaults to the previous one)

        Returns:
            The persisted state after the rollback

        Raises:
            NothingToRollbackError: If fewer than two deployments exist
            DeploymentNotFoundError: If ``rollback_id`` is not retained
            DeployError: If the hidden copy cannot be redeployed
        """
        target = Path(target)
        state = load_state(target)
        ids = state.sorted_ids(newest_first=True)

        if rollback_id is None:
            if len(ids) < 2:
                raise NothingToRollbackError(str(target), len(ids))
            rollback_id = ids[1]
        elif rollback_id not in state.deployments:
            raise DeploymentNotFoundError(str(target), rollback_id, ids)

        self.logger.info(f"Rolling back {target} to #{rollback_id}")
        source = get_hidden_target(target, rollback_id)
        return self.deploy(source, target, message, original_id=rollback_id)

    def list_deployments(self, target: PathLike) -> List[DeploymentRow]:
        """List the retained deployments of ``target``, newest first

        Args:
            target: Stable target path

        Returns:
            One row per retained deployment
        """
        state = load_state(Path(target))
        return [
            DeploymentRow(
                id=deployment_id,
                message=state.deployments[deployment_id].message,
                time=state.deployments[deployment_id].time,
                is_current=deployment_id == state.current,
                original_id=state.deployments[deployment_id].original_id,
            )
            for deployment_id in state.sorted_ids(newest_first=True)
        ]

    def _promote(self,
                 state: TargetState,
                 source: Path,
                 now: datetime,
                 message: str,
                 original_id: Optional[int]) -> TargetState:
        """Copy, relink and record a deployment without persisting it"""
        next_id = state.next_deployment()
        hidden_path = get_hidden_target(state.target, next_id)

        try:
            size = copy_file(source, hidden_path)
        except OSError as e:
            if e.filename is not None and Path(e.filename) == source:
                code = ErrorCode.SOURCE_NOT_READABLE
            else:
                code = ErrorCode.TARGET_NOT_WRITABLE
            raise DeployError(f"Failed to copy {source} to {hidden_path}: {e}", code) from e

        self.logger.debug(f"Copied {size} bytes from {source} to {hidden_path}")

        # Symlink creation fails if the name is taken
        if path_exists(state.target):
            try:
                state.target.unlink()
            except OSError as e:
                raise DeployError(
                    f"Failed to remove existing target {state.target}: {e}",
                    ErrorCode.LINK_UPDATE_FAILED,
                ) from e

        # Link by basename: the hidden copy always sits next to the target
        try:
            state.target.symlink_to(hidden_path.name)
        except OSError as e:
            raise DeployError(
                f"Failed to link {state.target} to {hidden_path.name}: {e}. "
                f"The target is now absent; deployed copies are kept next to it",
                ErrorCode.LINK_UPDATE_FAILED,
            ) from e

        self.logger.debug(f"Linked {state.target} -> {hidden_path.name}")

        return apply_deployment(state, DeploymentAdded(
            deployment_id=next_id,
            time=now,
            message=message,
            original_id=original_id,
        ))

    def _remove_evicted(self, target: Path, evicted_ids: Sequence[int]) -> None:
        """Delete hidden copies of evicted deployments

        A copy that is already gone is ignored. A copy that cannot be removed
        is reported as a warning, or raised when ``strict_cleanup`` is set.
        """
        failures = []

        for deployment_id in evicted_ids:
            hidden_path = get_hidden_target(target, deployment_id)
            try:
                if remove_if_exists(hidden_path):
                    self.logger.debug(f"Removed evicted copy {hidden_path}")
                else:
                    self.logger.debug(f"Evicted copy already gone: {hidden_path}")
            except OSError as e:
                failures.append(f"{hidden_path}: {e}")
                self.logger.warning(f"Failed to remove evicted copy {hidden_path}: {e}")

        if failures and self.config.strict_cleanup:
            raise DeployError(
                "Failed to remove evicted copies: " + "; ".join(failures),
                ErrorCode.CLEANUP_FAILED,
            )
