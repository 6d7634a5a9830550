# easy_deploy/models/state.py
"""Deployment state models and the transitions applied to them

A ``TargetState`` is never mutated in place. Deploying, rolling back and
garbage collecting each produce a new state from the previous one, so the
deploy pipeline can be checked without touching the filesystem.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..utils.formatting import format_timestamp, parse_timestamp


@dataclass(frozen=True)
class DeploymentRecord:
    """One historical deployment of a target"""
    time: datetime
    original_id: int
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'time': format_timestamp(self.time),
            'message': self.message,
            'originalId': self.original_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeploymentRecord':
        """Create from dictionary"""
        return cls(
            time=parse_timestamp(data['time']),
            message=_require_str(data['message'], 'message'),
            original_id=parse_deployment_id(data['originalId']),
        )


@dataclass(frozen=True)
class TargetState:
    """Full deployment history of one target path"""
    target: Path
    deployments: Dict[int, DeploymentRecord] = field(default_factory=dict)
    current: Optional[int] = None

    def next_deployment(self) -> int:
        """Get the id the next deployment will receive"""
        if not self.deployments:
            return 0
        return max(self.deployments) + 1

    def sorted_ids(self, newest_first: bool = True) -> List[int]:
        """Get deployment ids ordered by age"""
        return sorted(self.deployments, reverse=newest_first)

    @property
    def current_record(self) -> Optional[DeploymentRecord]:
        """Get the record the target currently points at"""
        if self.current is None:
            return None
        return self.deployments.get(self.current)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'deployments': {
                str(deployment_id): record.to_dict()
                for deployment_id, record in sorted(self.deployments.items())
            },
            'current': self.current,
            'target': str(self.target),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TargetState':
        """Create from dictionary"""
        deployments = parse_deployments(data, DeploymentRecord.from_dict)
        return cls(
            target=Path(_require_str(data['target'], 'target')),
            deployments=deployments,
            current=parse_current(data),
        )


@dataclass(frozen=True)
class DeploymentAdded:
    """A file was promoted to the target under a new deployment id"""
    deployment_id: int
    time: datetime
    message: str = ""
    original_id: Optional[int] = None


@dataclass(frozen=True)
class GarbageCollection:
    """Outcome of evicting old deployments"""
    state: TargetState
    evicted_ids: Tuple[int, ...] = ()


def apply_deployment(state: TargetState, event: DeploymentAdded) -> TargetState:
    """Record a deployment and make it current

    Args:
        state: State before the deployment
        event: Deployment to record

    Returns:
        New state with the record added and ``current`` set to it

    Raises:
        ValueError: If the id is already used or lower than an existing one
    """
    if event.deployment_id < state.next_deployment():
        raise ValueError(
            f"deployment id {event.deployment_id} is not newer than "
            f"existing ids for {state.target}"
        )

    original_id = event.original_id
    if original_id is None:
        original_id = event.deployment_id

    deployments = dict(state.deployments)
    deployments[event.deployment_id] = DeploymentRecord(
        time=event.time,
        message=event.message,
        original_id=original_id,
    )
    return replace(state, deployments=deployments, current=event.deployment_id)


def garbage_collect(state: TargetState, keep: int) -> GarbageCollection:
    """Keep the ``keep`` newest deployments and evict the rest

    Args:
        state: State to collect
        keep: Number of deployments to retain, at least 1

    Returns:
        GarbageCollection with the trimmed state and evicted ids, oldest first
    """
    if keep < 1:
        raise ValueError(f"must keep at least one deployment, got {keep}")

    ids = state.sorted_ids(newest_first=True)
    retained = ids[:keep]
    evicted = sorted(ids[keep:])
    if not evicted:
        return GarbageCollection(state=state)

    # current is always the newest id, so it is never evicted
    if state.current is not None and state.current not in retained:
        raise ValueError(
            f"refusing to evict current deployment {state.current} "
            f"of {state.target}"
        )

    deployments = {i: state.deployments[i] for i in sorted(retained)}
    return GarbageCollection(
        state=replace(state, deployments=deployments),
        evicted_ids=tuple(evicted),
    )


def parse_deployment_id(value: Any) -> int:
    """Parse a deployment id from a JSON key or value

    Raises:
        ValueError: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid deployment id: {value!r}")
    if isinstance(value, str):
        if not value.isdigit():
            raise ValueError(f"invalid deployment id: {value!r}")
        return int(value)
    if isinstance(value, int) and value >= 0:
        return value
    raise ValueError(f"invalid deployment id: {value!r}")


def parse_deployments(data: Dict[str, Any], parse_record) -> Dict[int, Any]:
    """Parse the ``deployments`` mapping of any schema version"""
    raw = data['deployments']
    if not isinstance(raw, dict):
        raise ValueError("'deployments' must be an object")
    deployments = {}
    for key, value in raw.items():
        if not isinstance(value, dict):
            raise ValueError(f"deployment {key!r} must be an object")
        deployments[parse_deployment_id(key)] = parse_record(value)
    return deployments


def parse_current(data: Dict[str, Any]) -> Optional[int]:
    """Parse the ``current`` pointer of any schema version"""
    current = data['current']
    if current is None:
        return None
    return parse_deployment_id(current)


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{name}' must be a string")
    return value
