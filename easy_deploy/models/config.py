"""Configuration data models"""

from dataclasses import dataclass, fields
from typing import Any, Dict

from ..constants import MAX_VERSIONS_TO_KEEP


@dataclass
class EasyDeployConfig:
    """Runtime configuration for the deployment engine"""

    # Number of deployments (and hidden copies) retained per target
    max_versions_to_keep: int = MAX_VERSIONS_TO_KEEP

    # Fail the deploy when an evicted hidden copy exists but cannot be removed
    strict_cleanup: bool = False

    def __post_init__(self):
        """Validate configuration"""
        if isinstance(self.max_versions_to_keep, bool) or not isinstance(self.max_versions_to_keep, int):
            raise ValueError("'max_versions_to_keep' must be an integer")
        if self.max_versions_to_keep < 1:
            raise ValueError("'max_versions_to_keep' must be at least 1")
        if not isinstance(self.strict_cleanup, bool):
            raise ValueError("'strict_cleanup' must be a boolean")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'max_versions_to_keep': self.max_versions_to_keep,
            'strict_cleanup': self.strict_cleanup,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EasyDeployConfig':
        """Create from dictionary

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        defaults = cls()
        return cls(
            max_versions_to_keep=data.get('max_versions_to_keep', defaults.max_versions_to_keep),
            strict_cleanup=data.get('strict_cleanup', defaults.strict_cleanup),
        )
