"""Rollback command implementation"""

import click

from ..decorators import handle_errors
from ..utils.output import format_deploy_result


@click.command()
@click.argument('target', type=click.Path())
@click.option('-m', '--message', default='', help='Annotation stored with the rollback')
@click.option('--id', 'rollback_id', type=click.IntRange(min=0),
              help='Deployment id to restore (defaults to the previous deployment)')
@click.pass_context
@handle_errors
def rollback(ctx, target, message, rollback_id):
    """Roll TARGET back to an earlier deployment

    The restored version is recorded as a new deployment whose origin
    is the deployment it came from. History is never rewritten.

    Examples:

        # Go back to the previous deployment
        easy-deploy rollback /usr/local/bin/my_bin

        # Restore a specific deployment
        easy-deploy rollback /usr/local/bin/my_bin --id 4 -m "bad release"
    """
    state = ctx.obj.deployer.rollback(target, message, rollback_id)

    if not ctx.obj.quiet:
        format_deploy_result(state, action="Rolled back")
