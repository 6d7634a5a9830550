"""List command implementation"""

import click

from ..decorators import handle_errors
from ..utils.output import format_deployment_list, format_json


@click.command(name='list')
@click.argument('target', type=click.Path())
@click.option('--json', 'as_json', is_flag=True, help='Print deployments as JSON')
@click.pass_context
@handle_errors
def list_deployments(ctx, target, as_json):
    """List deployments of TARGET, newest first

    The current deployment is marked with '*'. Rollbacks show the
    deployment they restored in the origin column.

    Example:
        easy-deploy list /usr/local/bin/my_bin
    """
    rows = ctx.obj.deployer.list_deployments(target)

    if as_json:
        format_json([row.to_dict() for row in rows])
    else:
        format_deployment_list(rows, target)
