"""CLI utility functions"""

from .output import (
    console,
    err_console,
    build_deployment_table,
    format_deployment_list,
    format_deploy_result,
    format_json,
    print_error,
)

__all__ = [
    # Output utilities
    'console',
    'err_console',
    'build_deployment_table',
    'format_deployment_list',
    'format_deploy_result',
    'format_json',
    'print_error',
]
