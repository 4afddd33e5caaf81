"""Reserved CSS keyword sets.

``grid-template-areas`` accepts the CSS-wide keywords; ``grid-area`` accepts
the same set plus ``auto``. The second set is derived from the first so the
two utility families cannot drift apart.
"""

from __future__ import annotations

CSS_WIDE_KEYWORDS: tuple[str, ...] = (
    "none",
    "inherit",
    "initial",
    "revert",
    "revert-layer",
    "unset",
)

GRID_AREA_KEYWORDS: tuple[str, ...] = ("auto", *CSS_WIDE_KEYWORDS)

# Cell tokens that mark an unoccupied grid cell.
EMPTY_CELL_MARKERS: frozenset[str] = frozenset({".", ".."})
