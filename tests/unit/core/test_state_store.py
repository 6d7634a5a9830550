"""Unit tests for loading and saving target state."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from easy_deploy.api.exceptions import StateCorruptedError, StateError
from easy_deploy.core.path_resolver import get_state_path
from easy_deploy.core.state_store import dump_state, load_state
from easy_deploy.models.state import DeploymentRecord, TargetState

T0 = datetime(2020, 1, 1, 4, 50, tzinfo=timezone.utc)


def _write_document(target: Path, document) -> Path:
    state_path = get_state_path(target)
    state_path.write_text(json.dumps(document), encoding="utf-8")
    return state_path


class TestLoadState:
    """Tests for load_state."""

    def test_missing_state_returns_empty(self, target: Path) -> None:
        """A never-deployed target has an empty state."""
        state = load_state(target)

        assert state == TargetState(target=target)
        assert state.current is None

    def test_save_and_load_round_trip(self, target: Path) -> None:
        """Saved state loads back unchanged."""
        state = TargetState(
            target=target,
            deployments={
                0: DeploymentRecord(time=T0, message="one", original_id=0),
                1: DeploymentRecord(time=T0, message="two", original_id=0),
            },
            current=1,
        )

        dump_state(state)

        assert load_state(target) == state

    def test_invalid_json_raises(self, target: Path) -> None:
        """Unparsable state is fatal."""
        get_state_path(target).write_text("{invalid", encoding="utf-8")

        with pytest.raises(StateCorruptedError, match="invalid JSON"):
            load_state(target)

    def test_unknown_schema_raises(self, target: Path) -> None:
        """Unknown schema tags are reported as corruption."""
        _write_document(target, {"V7": {"deployments": {}, "current": None}})

        with pytest.raises(StateCorruptedError, match="unknown state schema"):
            load_state(target)

    def test_missing_field_raises(self, target: Path) -> None:
        """Payloads missing required fields are corrupt."""
        _write_document(target, {"V3": {"deployments": {}, "target": str(target)}})

        with pytest.raises(StateCorruptedError, match="missing field"):
            load_state(target)

    def test_dangling_current_raises(self, target: Path) -> None:
        """current must name a recorded deployment."""
        _write_document(target, {
            "V3": {
                "deployments": {
                    "0": {"time": "2020-01-01T04:50:00Z", "message": "", "originalId": 0},
                },
                "current": 5,
                "target": str(target),
            }
        })

        with pytest.raises(StateCorruptedError, match="not a recorded deployment"):
            load_state(target)

    def test_unreadable_state_raises_state_error(self, target: Path) -> None:
        """A state path that cannot be read is an I/O failure."""
        get_state_path(target).mkdir()

        with pytest.raises(StateError):
            load_state(target)

    def test_recorded_target_is_replaced_by_location(self, target: Path) -> None:
        """State is keyed by where the file is, not what it says."""
        _write_document(target, {
            "V3": {"deployments": {}, "current": None, "target": "/elsewhere/my_bin"},
        })

        assert load_state(target).target == target


class TestMigration:
    """Tests for upgrading old state files."""

    def _write_v1(self, target: Path) -> Path:
        return _write_document(target, {
            "V1": {
                "deployments": {
                    "0": {"time": "2020-01-01T04:50:00Z"},
                    "1": {"time": "2020-01-01T04:55:00Z"},
                },
                "current": 1,
                "target": str(target),
            }
        })

    def test_v1_file_loads_in_current_shape(self, target: Path) -> None:
        """Old records get an empty message and their own id as origin."""
        self._write_v1(target)

        state = load_state(target)

        assert state.current == 1
        assert set(state.deployments) == {0, 1}
        for deployment_id, record in state.deployments.items():
            assert record.message == ""
            assert record.original_id == deployment_id

    @pytest.mark.parametrize("document", [
        {"V1": {"deployments": {"0": {"time": "2020-01-01T04:50:00.123456789Z"}}}},
        {"V2": {"deployments": {"0": {"time": "2020-01-01T04:50:00.123456789Z", "message": "m"}}}},
    ], ids=["v1", "v2"])
    def test_nanosecond_timestamps_are_truncated(self, target: Path, document) -> None:
        """Old files written with nanosecond precision still load."""
        payload = next(iter(document.values()))
        payload["current"] = 0
        payload["target"] = str(target)
        _write_document(target, document)

        state = load_state(target)

        assert state.deployments[0].time == datetime(
            2020, 1, 1, 4, 50, 0, 123456, tzinfo=timezone.utc
        )
        assert state.deployments[0].original_id == 0

    def test_loading_does_not_rewrite_file(self, target: Path) -> None:
        """Loading never writes, so the old file stays as it was."""
        state_path = self._write_v1(target)
        before = state_path.read_text(encoding="utf-8")

        load_state(target)

        assert state_path.read_text(encoding="utf-8") == before

    def test_resave_writes_current_schema_only(self, target: Path) -> None:
        """Re-saving an upgraded state writes the current tag."""
        state_path = self._write_v1(target)

        state = load_state(target)
        dump_state(state)
        document = json.loads(state_path.read_text(encoding="utf-8"))

        assert list(document) == ["V3"]
        assert document["V3"]["deployments"]["0"] == {
            "time": "2020-01-01T04:50:00Z",
            "message": "",
            "originalId": 0,
        }
        assert document["V3"]["current"] == 1

    def test_migration_is_idempotent(self, target: Path) -> None:
        """A second load-save cycle changes nothing."""
        state_path = self._write_v1(target)

        dump_state(load_state(target))
        first = state_path.read_text(encoding="utf-8")
        dump_state(load_state(target))

        assert state_path.read_text(encoding="utf-8") == first
