"""Pytest configuration and shared fixtures for easy-deploy tests."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from easy_deploy.core.wall_clock import FakeClock
from easy_deploy.models.config import EasyDeployConfig
from easy_deploy.services.deploy_service import DeployService


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep user configuration and environment out of tests."""
    for name in (
        "EASY_DEPLOY_CONFIG",
        "EASY_DEPLOY_LOG_LEVEL",
        "EASY_DEPLOY_MAX_VERSIONS",
        "EASY_DEPLOY_STRICT_CLEANUP",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield
    # The CLI's --quiet flag disables logging process-wide
    logging.disable(logging.NOTSET)


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock at a fixed instant."""
    return FakeClock(datetime(2020, 1, 1, 4, 50, tzinfo=timezone.utc))


@pytest.fixture
def target(tmp_path: Path) -> Path:
    """Target path inside a fresh directory."""
    directory = tmp_path / "deploy"
    directory.mkdir()
    return directory / "my_bin"


@pytest.fixture
def source(tmp_path: Path) -> Path:
    """Path of the file to deploy (not yet created)."""
    return tmp_path / "to_deploy.exe"


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    """Write text to a file and return its path."""

    def _write(path: Path, contents: str) -> Path:
        path.write_text(contents, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def service(clock: FakeClock) -> DeployService:
    """Deploy service with a fake clock and default configuration."""
    return DeployService(clock=clock, config=EasyDeployConfig())
