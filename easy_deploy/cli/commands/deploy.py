"""Deploy command implementation"""

import click

from ..decorators import handle_errors
from ..utils.output import format_deploy_result


@click.command()
@click.argument('source', type=click.Path(dir_okay=False))
@click.argument('target', type=click.Path())
@click.option('-m', '--message', default='', help='Annotation stored with the deployment')
@click.pass_context
@handle_errors
def deploy(ctx, source, target, message):
    """Deploy SOURCE to TARGET

    Copies SOURCE into a hidden, numbered file next to TARGET and points
    the TARGET symlink at it. The previous versions stay on disk so they
    can be rolled back to.

        target_dir/
        ├── my_bin -> .3_my_bin
        ├── .easy-deploy_my_bin
        ├── .2_my_bin
        └── .3_my_bin

    Examples:

        # Deploy a freshly built binary
        easy-deploy deploy build/my_bin /usr/local/bin/my_bin

        # Deploy with a message
        easy-deploy deploy build/my_bin ~/bin/my_bin -m "fix crash on start"
    """
    state = ctx.obj.deployer.deploy(source, target, message)

    if not ctx.obj.quiet:
        format_deploy_result(state, action="Deployed")
