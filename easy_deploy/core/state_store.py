# easy_deploy/core/state_store.py
"""Load and save the sidecar state file of a target

The state file is overwritten in place. A crash in the middle of
``dump_state`` can leave a truncated file behind, which the next load
reports as corrupted.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Union

from ..api.exceptions import StateCorruptedError, StateError
from ..constants import CURRENT_STATE_SCHEMA
from ..models.schema import VersionedTargetState
from ..models.state import TargetState
from .path_resolver import get_state_path

logger = logging.getLogger(__name__)


def load_state(target: Union[str, Path]) -> TargetState:
    """Load the deployment state of ``target``, upgrading older schemas

    Args:
        target: Stable target path

    Returns:
        The stored state in the current schema, or an empty state if the
        target was never deployed

    Raises:
        StateError: If the state file cannot be read
        StateCorruptedError: If the state file cannot be parsed
    """
    target = Path(target)
    state_path = get_state_path(target)

    if not state_path.exists():
        logger.debug(f"No state file at {state_path}, starting fresh")
        return TargetState(target=target)

    try:
        content = state_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StateError(f"Failed to read state file {state_path}: {exc}") from exc

    try:
        document = json.loads(content)
    except json.JSONDecodeError as exc:
        raise StateCorruptedError(str(state_path), f"invalid JSON: {exc}") from exc

    try:
        versioned = VersionedTargetState.from_dict(document)
    except KeyError as exc:
        raise StateCorruptedError(str(state_path), f"missing field {exc}") from exc
    except (ValueError, TypeError) as exc:
        raise StateCorruptedError(str(state_path), str(exc)) from exc

    if versioned.schema != CURRENT_STATE_SCHEMA:
        logger.info(
            f"Upgrading state of {target} from schema {versioned.schema} "
            f"to {CURRENT_STATE_SCHEMA}"
        )
    state = versioned.to_latest()
    if state.target != target:
        # The file is keyed by its location, not by the path recorded inside it
        logger.debug(f"State file records target {state.target}, using {target}")
        state = replace(state, target=target)

    _check_invariants(state, state_path)
    return state


def dump_state(state: TargetState) -> Path:
    """Write ``state`` to its sidecar file in the current schema

    Args:
        state: State to persist

    Returns:
        Path of the written state file

    Raises:
        StateError: If the state file cannot be written
    """
    state_path = get_state_path(state.target)
    payload = json.dumps(
        VersionedTargetState.from_state(state).to_dict(),
        indent=2,
        sort_keys=True,
    )

    try:
        state_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise StateError(f"Failed to write state file {state_path}: {exc}") from exc

    logger.debug(f"Saved state for {state.target} to {state_path}")
    return state_path


def _check_invariants(state: TargetState, state_path: Path) -> None:
    if not state.deployments:
        if state.current is not None:
            raise StateCorruptedError(
                str(state_path),
                f"current deployment {state.current} recorded without any deployments",
            )
        return

    if state.current is None:
        raise StateCorruptedError(str(state_path), "deployments recorded but no current deployment")
    if state.current not in state.deployments:
        raise StateCorruptedError(
            str(state_path),
            f"current deployment {state.current} is not a recorded deployment",
        )
