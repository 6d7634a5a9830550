"""Unit tests for deployment state transitions."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from easy_deploy.models.state import (
    DeploymentAdded,
    DeploymentRecord,
    TargetState,
    apply_deployment,
    garbage_collect,
)

T0 = datetime(2020, 1, 1, 12, 25, tzinfo=timezone.utc)


def _deploy_n(state: TargetState, count: int) -> TargetState:
    for i in range(count):
        event = DeploymentAdded(
            deployment_id=state.next_deployment(),
            time=T0 + timedelta(minutes=i),
            message=f"deploy {i}",
        )
        state = apply_deployment(state, event)
    return state


class TestNextDeployment:
    """Tests for id allocation."""

    def test_empty_state_starts_at_zero(self) -> None:
        """The first deployment gets id 0."""
        assert TargetState(target=Path("/t")).next_deployment() == 0

    def test_next_id_follows_highest_id(self) -> None:
        """Ids continue from the highest key, not from the count."""
        state = TargetState(
            target=Path("/t"),
            deployments={
                10: DeploymentRecord(time=T0, original_id=10),
                14: DeploymentRecord(time=T0, original_id=14),
            },
            current=14,
        )

        assert state.next_deployment() == 15


class TestApplyDeployment:
    """Tests for apply_deployment."""

    def test_fresh_deploy_is_its_own_origin(self) -> None:
        """A normal deploy records its own id as original id."""
        state = TargetState(target=Path("/t"))

        new_state = apply_deployment(state, DeploymentAdded(0, T0, "first"))

        assert new_state.current == 0
        assert new_state.deployments == {
            0: DeploymentRecord(time=T0, message="first", original_id=0)
        }
        assert state.deployments == {}

    def test_rollback_event_keeps_original_id(self) -> None:
        """A restored deployment points back at its source."""
        state = _deploy_n(TargetState(target=Path("/t")), 2)

        new_state = apply_deployment(
            state, DeploymentAdded(2, T0, "rollback", original_id=0)
        )

        assert new_state.current == 2
        assert new_state.deployments[2].original_id == 0

    def test_sequence_of_deploys_has_increasing_ids(self) -> None:
        """N deploys produce ids 0..N-1 with the last one current."""
        state = _deploy_n(TargetState(target=Path("/t")), 5)

        assert sorted(state.deployments) == [0, 1, 2, 3, 4]
        assert state.current == 4

    def test_reusing_an_id_is_rejected(self) -> None:
        """Ids are never reused."""
        state = _deploy_n(TargetState(target=Path("/t")), 2)

        with pytest.raises(ValueError):
            apply_deployment(state, DeploymentAdded(1, T0))


class TestGarbageCollect:
    """Tests for garbage_collect."""

    def test_nothing_evicted_below_limit(self) -> None:
        """States within the limit are returned unchanged."""
        state = _deploy_n(TargetState(target=Path("/t")), 3)

        collection = garbage_collect(state, keep=10)

        assert collection.state is state
        assert collection.evicted_ids == ()

    def test_oldest_ids_are_evicted(self) -> None:
        """Only the newest ids survive."""
        state = _deploy_n(TargetState(target=Path("/t")), 20)

        collection = garbage_collect(state, keep=10)

        assert sorted(collection.state.deployments) == list(range(10, 20))
        assert collection.evicted_ids == tuple(range(10))
        assert collection.state.current == 19

    def test_ids_keep_increasing_after_collection(self) -> None:
        """Eviction does not free ids for reuse."""
        state = _deploy_n(TargetState(target=Path("/t")), 12)
        state = garbage_collect(state, keep=10).state

        assert state.next_deployment() == 12

    def test_keep_must_be_positive(self) -> None:
        """Keeping zero deployments would drop the current one."""
        state = _deploy_n(TargetState(target=Path("/t")), 1)

        with pytest.raises(ValueError):
            garbage_collect(state, keep=0)
