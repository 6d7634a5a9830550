"""Unit tests for deployment history rendering."""

from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console

from easy_deploy.cli.utils.output import build_deployment_table, format_deploy_result
from easy_deploy.models.result import DeploymentRow
from easy_deploy.models.state import DeploymentRecord, TargetState

T0 = datetime(2020, 1, 1, 4, 50, tzinfo=timezone.utc)


def _render(table) -> str:
    console = Console(width=120, record=True)
    console.print(table)
    return console.export_text()


class TestDeploymentTable:
    """Tests for build_deployment_table."""

    def test_one_row_per_deployment(self) -> None:
        """Each deployment becomes one table row."""
        rows = [
            DeploymentRow(id=2, message="revert", time=T0, is_current=True, original_id=0),
            DeploymentRow(id=1, message="second", time=T0, is_current=False, original_id=1),
            DeploymentRow(id=0, message="first", time=T0, is_current=False, original_id=0),
        ]

        table = build_deployment_table(rows)

        assert table.row_count == 3
        assert [c.header for c in table.columns] == ["id", "time", "message", "origin", "current"]

    def test_rollback_origin_is_shown(self) -> None:
        """Rollbacks show the deployment they restored."""
        rows = [
            DeploymentRow(id=2, message="revert", time=T0, is_current=True, original_id=0),
        ]

        text = _render(build_deployment_table(rows))

        assert "#0" in text
        assert "*" in text

    def test_messages_are_not_markup(self) -> None:
        """Messages with brackets are printed literally."""
        rows = [
            DeploymentRow(id=0, message="[bold]hi[/bold]", time=T0, is_current=True, original_id=0),
        ]

        text = _render(build_deployment_table(rows))

        assert "[bold]hi[/bold]" in text

    def test_row_to_dict(self) -> None:
        """JSON rows use the state file field names."""
        row = DeploymentRow(id=3, message="m", time=T0, is_current=False, original_id=1)

        assert row.to_dict() == {
            "id": 3,
            "message": "m",
            "time": "2020-01-01T04:50:00Z",
            "current": False,
            "originalId": 1,
        }
        assert row.is_rollback


class TestDeployResult:
    """Tests for format_deploy_result."""

    def _state(self, count: int) -> TargetState:
        deployments = {
            i: DeploymentRecord(time=T0, message="", original_id=i) for i in range(count)
        }
        return TargetState(target=Path("/opt/my_bin"), deployments=deployments, current=count - 1)

    def test_single_deployment_is_singular(self, capsys) -> None:
        """One retained deployment is not pluralized."""
        format_deploy_result(self._state(1))

        assert "Retained: 1 deployment" in capsys.readouterr().out

    def test_retained_count_is_pluralized(self, capsys) -> None:
        """Several retained deployments use the plural."""
        format_deploy_result(self._state(3))

        out = capsys.readouterr().out
        assert "Retained: 3 deployments" in out
        assert "Deployed" in out
