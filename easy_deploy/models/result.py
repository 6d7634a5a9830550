"""Result models returned to the CLI and reporting layer"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from ..utils.formatting import format_timestamp


@dataclass(frozen=True)
class DeploymentRow:
    """One line of deployment history, ready for rendering"""
    id: int
    message: str
    time: datetime
    is_current: bool
    original_id: int

    @property
    def is_rollback(self) -> bool:
        """Check whether this deployment restored an older one"""
        return self.original_id != self.id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output"""
        return {
            'id': self.id,
            'message': self.message,
            'time': format_timestamp(self.time),
            'current': self.is_current,
            'originalId': self.original_id,
        }
