"""CSS emitter: pure functions from normalized layout data to utilities.

No I/O and no mutation of inputs. Every function returns new
:class:`~gridareas.domain.declarations.Utility` values.

An area named ``X`` implicitly defines the grid lines ``X-start`` and
``X-end``; the line utilities target those names.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from gridareas.domain.declarations import Declaration, Utility
from gridareas.domain.grammar import (
    format_rows,
    parse_arbitrary_areas,
    parse_arbitrary_placement,
)
from gridareas.domain.keywords import CSS_WIDE_KEYWORDS, GRID_AREA_KEYWORDS

type Resolver = Callable[[str], Declaration]

LAYOUT_PREFIX = "grid-areas"
AREA_PREFIX = "grid-area"


def emit_layout_utility(
    name: str,
    rows: Sequence[str],
    row_tracks: str | None = None,
    col_tracks: str | None = None,
) -> Utility:
    """``grid-areas-<name>``: display grid plus the template areas.

    Track properties are only emitted when given.
    """
    return Utility(
        f"{LAYOUT_PREFIX}-{name}",
        Declaration.of(
            ("display", "grid"),
            ("grid-template-areas", format_rows(rows, layout=name)),
            ("grid-template-rows", row_tracks or None),
            ("grid-template-columns", col_tracks or None),
        ),
    )


def emit_keyword_layout_utilities() -> list[Utility]:
    """``grid-areas-<keyword>`` for each CSS-wide keyword."""
    return [
        Utility(
            f"{LAYOUT_PREFIX}-{keyword}",
            Declaration.of(("display", "grid"), ("grid-template-areas", keyword)),
        )
        for keyword in CSS_WIDE_KEYWORDS
    ]


def emit_area_placement_utility(area: str) -> Utility:
    """``grid-area-<area>``."""
    return Utility(f"{AREA_PREFIX}-{area}", Declaration.of(("grid-area", area)))


def emit_area_keyword_utilities() -> list[Utility]:
    """``grid-area-<keyword>`` for ``auto`` and each CSS-wide keyword."""
    return [
        Utility(f"{AREA_PREFIX}-{keyword}", Declaration.of(("grid-area", keyword)))
        for keyword in GRID_AREA_KEYWORDS
    ]


def emit_line_utilities(area: str) -> list[Utility]:
    """Six named-line utilities for *area*: start, end, and span per axis."""
    start, end = f"{area}-start", f"{area}-end"
    utilities: list[Utility] = []
    for axis, prop in (("row", "grid-row"), ("col", "grid-column")):
        utilities.extend(
            [
                Utility(f"{axis}-start-{area}", Declaration.of((f"{prop}-start", start))),
                Utility(f"{axis}-end-{area}", Declaration.of((f"{prop}-end", end))),
                Utility(f"{axis}-span-{area}", Declaration.of((prop, f"{start} / {end}"))),
            ]
        )
    return utilities


# ── Arbitrary values ─────────────────────────────────────────────────


def resolve_grid_areas(value: str) -> Declaration:
    return Declaration.of(
        ("display", "grid"),
        ("grid-template-areas", parse_arbitrary_areas(value)),
    )


def resolve_grid_area(value: str) -> Declaration:
    return Declaration.of(("grid-area", parse_arbitrary_placement(value)))


def _raw_line_resolver(prop: str) -> Resolver:
    # Line names are single tokens, so the value is used as-is.
    def resolve(value: str) -> Declaration:
        return Declaration.of((prop, value))

    resolve.__name__ = f"resolve_{prop.replace('-', '_')}"
    return resolve


resolve_grid_row_start = _raw_line_resolver("grid-row-start")
resolve_grid_row_end = _raw_line_resolver("grid-row-end")
resolve_grid_column_start = _raw_line_resolver("grid-column-start")
resolve_grid_column_end = _raw_line_resolver("grid-column-end")


def emit_arbitrary_matchers() -> dict[str, dict[str, Resolver]]:
    """Resolvers for bracketed values, grouped by utility family.

    Each family maps a class prefix (``row-start`` in ``row-start-[x]``)
    to a function turning the raw bracket content into a declaration.
    """
    return {
        "grid-areas": {LAYOUT_PREFIX: resolve_grid_areas},
        "grid-area": {AREA_PREFIX: resolve_grid_area},
        "row-lines": {
            "row-start": resolve_grid_row_start,
            "row-end": resolve_grid_row_end,
        },
        "col-lines": {
            "col-start": resolve_grid_column_start,
            "col-end": resolve_grid_column_end,
        },
    }
