"""Data models for easy-deploy"""

from .state import (
    DeploymentRecord,
    TargetState,
    DeploymentAdded,
    GarbageCollection,
    apply_deployment,
    garbage_collect,
)
from .schema import (
    DeployedBinV1,
    DeployedBinV2,
    TargetStateV1,
    TargetStateV2,
    VersionedTargetState,
    UnknownSchemaError,
    migrate_to_latest,
)
from .config import EasyDeployConfig
from .result import DeploymentRow

__all__ = [
    # State models
    "DeploymentRecord",
    "TargetState",
    "DeploymentAdded",
    "GarbageCollection",
    "apply_deployment",
    "garbage_collect",

    # Schema models
    "DeployedBinV1",
    "DeployedBinV2",
    "TargetStateV1",
    "TargetStateV2",
    "VersionedTargetState",
    "UnknownSchemaError",
    "migrate_to_latest",

    # Config models
    "EasyDeployConfig",

    # Result models
    "DeploymentRow",
]
