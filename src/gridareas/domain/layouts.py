"""Layout definitions and configuration normalization.

A layout may be configured in two shapes::

    # shorthand: rows only
    {"card": ["media media", "title ."]}

    # full definition with optional track sizing
    {"page": {"rows": ["header header", "sidebar main"],
              "gridTemplateRows": "auto 1fr",
              "gridTemplateColumns": "200px 1fr"}}

Both normalize to :class:`LayoutDefinition`. Unrecognized keys are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from gridareas.domain.grammar import MalformedLayout

# Accepted spellings for track sizing, canonical name first.
ROW_TRACK_KEYS = ("row_tracks", "grid-template-rows", "gridTemplateRows")
COL_TRACK_KEYS = ("col_tracks", "grid-template-columns", "gridTemplateColumns")

type LayoutSource = Sequence[str] | Mapping[str, Any]


@dataclass(frozen=True)
class LayoutDefinition:
    """A named layout: ordered rows plus optional track sizing."""

    name: str
    rows: tuple[str, ...]
    row_tracks: str | None = None
    col_tracks: str | None = None


def _first_present(source: Mapping[str, Any], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = source.get(key)
        if value is not None:
            return str(value)
    return None


def _coerce_rows(name: str, rows: Any) -> tuple[str, ...]:
    if isinstance(rows, str) or not isinstance(rows, Sequence):
        raise MalformedLayout(
            f"Layout {name!r} rows must be a list of strings, got {type(rows).__name__}",
            layout=name,
        )
    for index, row in enumerate(rows):
        if not isinstance(row, str):
            raise MalformedLayout(
                f"Layout {name!r} row {index} is not a string: {row!r}",
                layout=name,
                row=index,
            )
    return tuple(rows)


def normalize_layout(name: str, source: LayoutSource | LayoutDefinition) -> LayoutDefinition:
    """Normalize one configured layout to a :class:`LayoutDefinition`."""
    if isinstance(source, LayoutDefinition):
        return source
    if isinstance(source, Mapping):
        return LayoutDefinition(
            name=name,
            rows=_coerce_rows(name, source.get("rows")),
            row_tracks=_first_present(source, ROW_TRACK_KEYS),
            col_tracks=_first_present(source, COL_TRACK_KEYS),
        )
    return LayoutDefinition(name=name, rows=_coerce_rows(name, source))


def normalize_layouts(
    config: Mapping[str, LayoutSource | LayoutDefinition] | None,
) -> list[LayoutDefinition]:
    """Normalize every configured layout, preserving configuration order."""
    if not config:
        return []
    return [normalize_layout(name, source) for name, source in config.items()]
