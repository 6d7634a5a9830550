"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    ENV_CONFIG_PATH,
    ENV_MAX_VERSIONS,
    ENV_STRICT_CLEANUP,
    USER_CONFIG_FILE,
)
from ..models.config import EasyDeployConfig

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def find_config_file(explicit: Optional[Union[str, Path]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Locate the configuration file to use

    Args:
        explicit: Path given on the command line
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Path of the file, or None when no file applies

    Raises:
        ConfigError: If an explicitly requested file does not exist
    """
    environ = os.environ if environ is None else environ

    if explicit:
        path = Path(explicit).expanduser()
    elif environ.get(ENV_CONFIG_PATH):
        path = Path(environ[ENV_CONFIG_PATH]).expanduser()
    else:
        # The default location is optional
        path = Path(USER_CONFIG_FILE).expanduser()
        return path if path.is_file() else None

    if not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    return path


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read a YAML configuration file

    Environment variables in the file are expanded before parsing.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file {path}: {e}") from e

    content = os.path.expandvars(content)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    return data


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    raw = environ.get(ENV_MAX_VERSIONS)
    if raw is not None:
        try:
            overrides['max_versions_to_keep'] = int(raw)
        except ValueError:
            raise ConfigError(f"{ENV_MAX_VERSIONS} must be an integer, got {raw!r}")

    raw = environ.get(ENV_STRICT_CLEANUP)
    if raw is not None:
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            overrides['strict_cleanup'] = True
        elif value in _FALSE_VALUES:
            overrides['strict_cleanup'] = False
        else:
            raise ConfigError(f"{ENV_STRICT_CLEANUP} must be a boolean, got {raw!r}")

    return overrides


def load_config(config_path: Optional[Union[str, Path]] = None,
                environ: Optional[Mapping[str, str]] = None) -> EasyDeployConfig:
    """Resolve configuration from defaults, file and environment

    Precedence, lowest first: built-in defaults, the YAML file, then
    ``EASY_DEPLOY_*`` environment variables.

    Args:
        config_path: Explicit configuration file
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Resolved configuration

    Raises:
        ConfigError: If the file or any value is invalid
    """
    environ = os.environ if environ is None else environ

    data: Dict[str, Any] = {}
    path = find_config_file(config_path, environ)
    if path:
        logger.debug(f"Loading configuration from {path}")
        data.update(read_config_file(path))

    data.update(_env_overrides(environ))

    try:
        return EasyDeployConfig.from_dict(data)
    except ValueError as e:
        source = f" in {path}" if path else ""
        raise ConfigError(f"Invalid configuration{source}: {e}") from e
