# easy_deploy/cli/utils/output.py
"""Output formatting utilities"""

import json
from typing import Any, List, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from ...constants import CURRENT_MARKER
from ...models import DeploymentRow, TargetState
from ...utils.formatting import format_local_time, pluralize

console = Console()
err_console = Console(stderr=True)


def build_deployment_table(rows: List[DeploymentRow],
                           title: Optional[str] = None) -> Table:
    """Create the deployment history table

    Args:
        rows: Deployments, newest first
        title: Optional table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("id", style="cyan", justify="right")
    table.add_column("time", style="dim")
    table.add_column("message")
    table.add_column("origin", style="dim", justify="right")
    table.add_column("current", style="green", justify="center")

    for row in rows:
        table.add_row(
            str(row.id),
            format_local_time(row.time),
            escape(row.message),
            f"#{row.original_id}" if row.is_rollback else "",
            CURRENT_MARKER if row.is_current else "",
        )

    return table


def format_deployment_list(rows: List[DeploymentRow], target: str) -> None:
    """Format and display the deployments of a target"""
    if not rows:
        console.print(f"[yellow]No deployments found for {escape(str(target))}[/yellow]")
        return

    console.print(build_deployment_table(rows, title=f"Deployments of {escape(str(target))}"))


def format_deploy_result(state: TargetState, action: str = "Deployed") -> None:
    """Format and display the outcome of a deploy or rollback"""
    record = state.current_record
    lines = [
        f"[green]✓[/green] {action} [bold]{escape(str(state.target))}[/bold] as #{state.current}",
    ]
    if record is not None:
        if record.original_id != state.current:
            lines.append(f"[bold]Restored:[/bold] #{record.original_id}")
        if record.message:
            lines.append(f"[bold]Message:[/bold] {escape(record.message)}")
    lines.append(f"[bold]Retained:[/bold] {pluralize(len(state.deployments), 'deployment')}")

    panel = Panel(
        "\n".join(lines),
        title=f"{action}",
        border_style="green"
    )
    console.print(panel)


def format_json(data: Any) -> None:
    """Print data as plain JSON, suitable for scripts"""
    click.echo(json.dumps(data, indent=2, default=str))


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        err_console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}")
    else:
        err_console.print(f"[red]Error:[/red] {escape(message)}")

