"""Shared pytest fixtures and test helpers for gridareas tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from gridareas.config.settings import GridAreasSettings
from gridareas.plugins.manager import PluginManager

PAGE_TOML = """\
[layouts.page]
rows = [
  "header header header",
  "sidebar main main",
  "footer footer footer",
]
grid-template-rows = "auto 1fr auto"
grid-template-columns = "200px 1fr 1fr"

[layouts]
card = ["media media", "title .", ".. actions"]
"""


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's GRIDAREAS_* environment out of the tests."""
    monkeypatch.delenv("GRIDAREAS_CONFIG", raising=False)
    monkeypatch.delenv("GRIDAREAS_LAYOUTS", raising=False)
    monkeypatch.delenv("GRIDAREAS_BUILD", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with a gridareas.toml defining two layouts."""
    (tmp_path / "gridareas.toml").write_text(PAGE_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> GridAreasSettings:
    """Settings resolved from the temporary project's config."""
    return GridAreasSettings.from_cli(project_root=project_root)


@pytest.fixture
def plugins() -> PluginManager:
    """A plugin manager that has been through (empty) discovery."""
    pm = PluginManager()
    pm.discover_and_load(local_dir=None)
    return pm


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temporary project so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(project_root)
