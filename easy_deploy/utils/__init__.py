# easy_deploy/utils/__init__.py
"""Utility functions for easy-deploy"""

from .file_utils import (
    copy_file,
    path_exists,
    remove_if_exists,
)

from .formatting import (
    format_timestamp,
    parse_timestamp,
    format_local_time,
    pluralize,
)

__all__ = [
    # File utilities
    'copy_file',
    'path_exists',
    'remove_if_exists',

    # Formatting utilities
    'format_timestamp',
    'parse_timestamp',
    'format_local_time',
    'pluralize',
]
