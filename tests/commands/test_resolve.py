"""Tests for the resolve CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from gridareas.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestResolveCommand:
    def test_static(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["resolve", "grid-area-main"])
        assert result.exit_code == 0
        assert result.output == ".grid-area-main {\n  grid-area: main;\n}\n"

    def test_arbitrary(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["resolve", "grid-areas-[a_a,b_c]"])
        assert result.exit_code == 0
        assert 'grid-template-areas: "a a" "b c";' in result.output
        assert result.output.startswith(".grid-areas-\\[a_a\\,b_c\\] {")

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "resolve", "col-start-main", "nope"])
        data = json.loads(result.output)
        assert data["data"]["items"][0]["declaration"] == {"grid-column-start": "main-start"}
        assert data["warnings"] == ["Not a grid-areas utility: nope"]

    def test_unknown_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["resolve", "gap-4"])
        assert result.exit_code == 0
        assert "WARNING: Not a grid-areas utility: gap-4" in result.output

    def test_requires_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["resolve"])
        assert result.exit_code == 2
