"""Config file discovery and reading.

Walk-up finder locates the nearest config, the way git finds .git/.
Two file kinds are recognized in each directory, in this order:

- ``gridareas.toml``: the whole file is the configuration.
- ``pyproject.toml`` with a ``[tool.gridareas]`` table.

GRIDAREAS_CONFIG and the --config CLI flag short-circuit the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "gridareas.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "GRIDAREAS_CONFIG"


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return "gridareas" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config file.

    Returns the path to the config file, or None if not found.
    Checks GRIDAREAS_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Return the raw configuration mapping stored in *path*.

    For ``pyproject.toml`` only the ``[tool.gridareas]`` table is returned.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        tool_table: dict[str, Any] = data.get("tool", {}).get("gridareas", {})
        return tool_table
    return data

