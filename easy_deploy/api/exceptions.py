"""Exception definitions for easy-deploy API"""

from typing import Optional

from ..constants import ErrorCode


class EasyDeployError(Exception):
    """Base exception for easy-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class DeployError(EasyDeployError):
    """Filesystem failure while promoting a file to its target"""
    pass


class StateError(EasyDeployError):
    """State file could not be read or written"""

    def __init__(self, message: str, error_code: str = ErrorCode.STATE_IO_ERROR):
        super().__init__(message, error_code)


class StateCorruptedError(StateError):
    """State file exists but cannot be understood"""

    def __init__(self, state_path: str, reason: str):
        message = f"Corrupted state file {state_path}: {reason}"
        super().__init__(message, ErrorCode.STATE_CORRUPTED)
        self.state_path = state_path
        self.reason = reason


class RollbackError(EasyDeployError):
    """Rollback precondition not met"""
    pass


class NothingToRollbackError(RollbackError):
    """Fewer than two deployments are recorded"""

    def __init__(self, target: str, count: int):
        message = (
            f"Nothing to roll back to for {target}: "
            f"{count} deployment(s) recorded, at least 2 required"
        )
        super().__init__(message, ErrorCode.NOTHING_TO_ROLLBACK)
        self.target = target
        self.count = count


class DeploymentNotFoundError(RollbackError):
    """Requested deployment id is not among the retained deployments"""

    def __init__(self, target: str, deployment_id: int,
                 available: Optional[list] = None):
        message = f"Deployment #{deployment_id} not found for {target}"
        if available:
            message += f" (available: {', '.join(str(i) for i in available)})"
        super().__init__(message, ErrorCode.DEPLOYMENT_NOT_FOUND)
        self.target = target
        self.deployment_id = deployment_id


class ConfigError(EasyDeployError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)
