"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gridareas.toml only contains
what differs. A project needs nothing but a ``[layouts]`` table.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

# --- gridareas.toml sections ---


class LayoutConfig(BaseModel):
    """[layouts.<name>] table in its full form."""

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    rows: list[str]
    row_tracks: str | None = Field(
        default=None,
        validation_alias=AliasChoices("row_tracks", "grid-template-rows", "gridTemplateRows"),
    )
    col_tracks: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "col_tracks", "grid-template-columns", "gridTemplateColumns"
        ),
    )


class BuildConfig(BaseModel):
    """[build] section."""

    model_config = {"frozen": True}

    output: str | None = None
    content: list[str] = Field(default_factory=list)


def layouts_as_sources(layouts: dict[str, list[str] | LayoutConfig]) -> dict[str, Any]:
    """Dump validated layouts into the plain shapes the domain normalizes."""
    return {
        name: layout.model_dump() if isinstance(layout, LayoutConfig) else list(layout)
        for name, layout in layouts.items()
    }
