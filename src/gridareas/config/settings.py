"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``GRIDAREAS_*`` prefix
  3. TOML file: ``gridareas.toml`` (or ``[tool.gridareas]``) via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
:mod:`gridareas.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from gridareas.config.discovery import find_config, read_config_data
from gridareas.config.models import BuildConfig, LayoutConfig, layouts_as_sources


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the discovered TOML config file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config_data(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return only the known TOML sections for Pydantic to merge."""
        return {key: self._data[key] for key in ("layouts", "build") if key in self._data}


# Carries the TOML path into settings_customise_sources during construction.
_tls = threading.local()


class GridAreasSettings(BaseSettings):
    """Settings for one gridareas CLI invocation.

    Stored on the :class:`~gridareas.commands._context.AppContext` at the
    CLI root and frozen after construction.

    Attributes:
        project_root: Directory holding the config file (or CWD if none);
            relative ``build`` paths resolve against it.
        config_path: The config file in use, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GRIDAREAS_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    layouts: dict[str, list[str] | LayoutConfig] = Field(default_factory=dict)
    build: BuildConfig = Field(default_factory=BuildConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> GridAreasSettings:
        """Construct settings from a CLI invocation.

        Discovers the config via walk-up (or uses an explicit *config_path*),
        resolves *project_root* from the config file's parent directory, and
        merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    def layout_sources(self) -> dict[str, Any]:
        """Configured layouts in the plain shapes the domain normalizes."""
        return layouts_as_sources(self.layouts)

    def resolve_path(self, path: str | Path) -> Path:
        """Resolve *path* against the project root unless it is absolute."""
        p = Path(path)
        return p if p.is_absolute() else self.project_root / p
