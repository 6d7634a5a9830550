# easy_deploy/models/schema.py
"""Versioned on-disk schema of the target state file

The state file holds a single-key object whose key names the schema the
payload was written with::

    {"V3": {"deployments": {"0": {...}}, "current": 0, "target": "/usr/bin/app"}}

Older payloads are upgraded one version at a time until they reach
``TargetState``. Only the latest schema is ever written.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..constants import (
    CURRENT_STATE_SCHEMA,
    STATE_SCHEMA_V1,
    STATE_SCHEMA_V2,
    STATE_SCHEMA_V3,
)
from ..utils.formatting import parse_timestamp
from .state import (
    DeploymentRecord,
    TargetState,
    parse_current,
    parse_deployments,
)


@dataclass(frozen=True)
class DeployedBinV1:
    """V1 record: timestamp only"""
    time: datetime

    def to_v2(self) -> 'DeployedBinV2':
        return DeployedBinV2(time=self.time, message="")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployedBinV1':
        return cls(time=parse_timestamp(data['time']))


@dataclass(frozen=True)
class DeployedBinV2:
    """V2 record: adds a free-text message"""
    time: datetime
    message: str = ""

    def to_v3(self, deployment_id: int) -> DeploymentRecord:
        return DeploymentRecord(
            time=self.time,
            message=self.message,
            original_id=deployment_id,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployedBinV2':
        message = data['message']
        if not isinstance(message, str):
            raise ValueError("'message' must be a string")
        return cls(time=parse_timestamp(data['time']), message=message)


@dataclass(frozen=True)
class TargetStateV1:
    target: Path
    deployments: Dict[int, DeployedBinV1] = field(default_factory=dict)
    current: Optional[int] = None

    def to_next(self) -> 'TargetStateV2':
        return TargetStateV2(
            target=self.target,
            deployments={k: v.to_v2() for k, v in self.deployments.items()},
            current=self.current,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TargetStateV1':
        return cls(
            target=_parse_target(data),
            deployments=parse_deployments(data, DeployedBinV1.from_dict),
            current=parse_current(data),
        )


@dataclass(frozen=True)
class TargetStateV2:
    target: Path
    deployments: Dict[int, DeployedBinV2] = field(default_factory=dict)
    current: Optional[int] = None

    def to_next(self) -> TargetState:
        return TargetState(
            target=self.target,
            deployments={k: v.to_v3(k) for k, v in self.deployments.items()},
            current=self.current,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TargetStateV2':
        return cls(
            target=_parse_target(data),
            deployments=parse_deployments(data, DeployedBinV2.from_dict),
            current=parse_current(data),
        )


AnyTargetState = Union[TargetStateV1, TargetStateV2, TargetState]

# Schema tag -> payload class, oldest first
SCHEMA_VERSIONS = {
    STATE_SCHEMA_V1: TargetStateV1,
    STATE_SCHEMA_V2: TargetStateV2,
    STATE_SCHEMA_V3: TargetState,
}


class UnknownSchemaError(ValueError):
    """State document is tagged with a schema this version cannot read"""
    pass


@dataclass(frozen=True)
class VersionedTargetState:
    """A target state payload together with its schema tag"""
    schema: str
    payload: AnyTargetState

    @classmethod
    def from_dict(cls, document: Any) -> 'VersionedTargetState':
        """Dispatch a raw JSON document on its schema tag

        Raises:
            UnknownSchemaError: If the tag is not a known schema
            ValueError: If the document or payload is malformed
            KeyError: If a required field is missing
        """
        if not isinstance(document, dict) or len(document) != 1:
            raise ValueError("state document must be an object with exactly one schema tag")

        (schema, payload), = document.items()
        payload_cls = SCHEMA_VERSIONS.get(schema)
        if payload_cls is None:
            raise UnknownSchemaError(f"unknown state schema {schema!r}")
        if not isinstance(payload, dict):
            raise ValueError(f"{schema} payload must be an object")

        return cls(schema=schema, payload=payload_cls.from_dict(payload))

    @classmethod
    def from_state(cls, state: TargetState) -> 'VersionedTargetState':
        """Wrap a current state for writing"""
        return cls(schema=CURRENT_STATE_SCHEMA, payload=state)

    def to_latest(self) -> TargetState:
        """Upgrade the payload through every newer schema"""
        return migrate_to_latest(self.payload)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary; only the current schema can be written"""
        if self.schema != CURRENT_STATE_SCHEMA or not isinstance(self.payload, TargetState):
            raise ValueError(f"refusing to write stale state schema {self.schema}")
        return {self.schema: self.payload.to_dict()}


def migrate_to_latest(state: AnyTargetState) -> TargetState:
    """Fold an older payload forward until it is a ``TargetState``

    A current payload is returned unchanged.
    """
    while not isinstance(state, TargetState):
        state = state.to_next()
    return state


def _parse_target(data: Dict[str, Any]) -> Path:
    target = data['target']
    if not isinstance(target, str):
        raise ValueError("'target' must be a string")
    return Path(target)
