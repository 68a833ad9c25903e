"""Shared pytest fixtures for solidctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from solidctl.config.settings import SolidSettings
from solidctl.domain.registry import reset_registry


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate tests from SOLIDCTL_CONFIG, plugin registrations and CLI logging setup."""
    monkeypatch.delenv("SOLIDCTL_CONFIG", raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    solid = logging.getLogger("solidctl")
    solid_level = solid.level
    reset_registry()
    yield
    reset_registry()
    root.handlers = handlers
    solid.setLevel(solid_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory without a solidctl.toml."""
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> SolidSettings:
    """Default settings rooted at a temp directory."""
    return SolidSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project so the CLI never sees a real config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(project_root)
