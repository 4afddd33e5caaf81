"""Area registry: distinct area names referenced by layouts.

Empty-cell markers (``.`` and ``..``) are never area names. No identifier
validation happens here: an invalid name surfaces as an invalid class name
downstream.

Enumeration order is first-seen order, so a fixed set of layouts processed
in a fixed order always yields the same sequence.
"""

from __future__ import annotations

from collections.abc import Iterable

from gridareas.domain.grammar import split_cells
from gridareas.domain.keywords import EMPTY_CELL_MARKERS


def extract_area_names(rows: Iterable[str]) -> list[str]:
    """Return the distinct area names in *rows*, in first-seen order.

    Examples:
        >>> extract_area_names(["a . b", ". c ."])
        ['a', 'b', 'c']
    """
    names: dict[str, None] = {}
    for row in rows:
        for cell in split_cells(row):
            if cell not in EMPTY_CELL_MARKERS:
                names.setdefault(cell, None)
    return list(names)


class AreaRegistry:
    """Accumulates area names across several layouts.

    Also tracks which layouts reference each area, for reporting.
    """

    def __init__(self) -> None:
        self._layouts_by_area: dict[str, list[str]] = {}

    def add(self, layout: str, rows: Iterable[str]) -> list[str]:
        """Register the areas of one layout; returns that layout's area names."""
        names = extract_area_names(rows)
        for name in names:
            self._layouts_by_area.setdefault(name, []).append(layout)
        return names

    @property
    def names(self) -> list[str]:
        """All registered area names in first-seen order."""
        return list(self._layouts_by_area)

    def layouts_for(self, area: str) -> list[str]:
        """Names of the layouts that reference *area*."""
        return list(self._layouts_by_area.get(area, []))

    def __contains__(self, area: object) -> bool:
        return area in self._layouts_by_area

    def __len__(self) -> int:
        return len(self._layouts_by_area)
