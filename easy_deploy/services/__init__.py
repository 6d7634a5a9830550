"""Service layer for easy-deploy"""

from .deploy_service import DeployService
from .config_service import load_config, find_config_file, read_config_file

__all__ = [
    "DeployService",
    "load_config",
    "find_config_file",
    "read_config_file",
]
