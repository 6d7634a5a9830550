"""Path derivation for targets, hidden copies and state files"""

from pathlib import Path
from typing import Callable, Union

from ..constants import HIDDEN_FILE_PREFIX, HIDDEN_ID_SEPARATOR, STATE_FILE_PREFIX


def _modify_filename(path: Union[str, Path], rename: Callable[[str], str]) -> Path:
    """Apply ``rename`` to the filename of ``path``, keeping its directory

    Raises:
        ValueError: If the path has no filename component
    """
    path = Path(path)
    name = path.name
    if not name or name in ('.', '..'):
        raise ValueError(f"invalid path, can't get file name: {str(path)!r}")
    return path.with_name(rename(name))


def get_hidden_target(target: Union[str, Path], deployment_id: int) -> Path:
    """Get the hidden copy path for a deployment of ``target``

    Args:
        target: Stable target path
        deployment_id: Deployment id

    Returns:
        Sibling path named ``.<id>_<name>``
    """
    prefix = f"{HIDDEN_FILE_PREFIX}{deployment_id}{HIDDEN_ID_SEPARATOR}"
    return _modify_filename(target, lambda name: prefix + name)


def get_state_path(target: Union[str, Path]) -> Path:
    """Get the sidecar state file path for ``target``

    Args:
        target: Stable target path

    Returns:
        Sibling path named ``.easy-deploy_<name>``
    """
    return _modify_filename(target, lambda name: STATE_FILE_PREFIX + name)
