"""Tests for the areas CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from gridareas.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestAreasCommand:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["areas"])
        assert result.exit_code == 0
        assert "Grid areas (7)" in result.output
        assert "sidebar" in result.output

    def test_quiet_lists_names(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "areas"])
        assert result.exit_code == 0
        assert result.output.split() == [
            "header",
            "sidebar",
            "main",
            "footer",
            "media",
            "title",
            "actions",
        ]

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "areas"])
        data = json.loads(result.output)
        assert data["op"] == "list_areas"
        assert data["data"]["count"] == 7
        assert data["data"]["layouts"][1]["name"] == "card"


class TestAreasEmpty:
    def test_no_config(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["areas"])
        assert result.exit_code == 0
        assert "No areas defined" in result.output
