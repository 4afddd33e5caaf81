"""Layout grammar: static row sets and the arbitrary-value mini-language.

Two input shapes:
- Static rows from configuration: ``["header header", "sidebar main"]``.
- Arbitrary values from a class name's bracket segment:
  ``header_header,sidebar_main`` where ``_`` is a cell space and ``,``
  separates rows.

CSS variables (``var(--x)``) pass through unquoted, either standing in for
the whole value or for a single row.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# A value that is nothing but a custom-property reference.
_WHOLE_VAR_PATTERN = re.compile(r"^var\(.*\)$")
# A row that contains a custom-property reference anywhere.
_ROW_VAR_PATTERN = re.compile(r"var\(.*\)")

ROW_SEPARATOR = ","
CELL_SEPARATOR = "_"


class MalformedLayout(ValueError):
    """Static layout configuration that cannot produce a valid CSS string."""

    def __init__(self, message: str, *, layout: str | None = None, row: int | None = None) -> None:
        super().__init__(message)
        self.layout = layout
        self.row = row


def split_cells(row: str) -> list[str]:
    """Split a row into cell tokens on runs of whitespace.

    Examples:
        >>> split_cells("  header   header ")
        ['header', 'header']
        >>> split_cells("")
        []
    """
    return row.split()


def format_row(row: str) -> str:
    """Render one static row as a quoted ``grid-template-areas`` segment.

    Raises:
        MalformedLayout: The row holds no cell tokens.
    """
    cells = split_cells(row)
    if not cells:
        raise MalformedLayout(f"Empty row in layout: {row!r}")
    return f'"{" ".join(cells)}"'


def format_rows(rows: Iterable[str], *, layout: str | None = None) -> str:
    """Render static rows as a full ``grid-template-areas`` value.

    Row order is preserved. Internal whitespace is collapsed so
    ``"a   b"`` and ``"a b"`` produce the same segment.
    """
    segments: list[str] = []
    for index, row in enumerate(rows):
        try:
            segments.append(format_row(row))
        except MalformedLayout as exc:
            name = f" {layout!r}" if layout else ""
            raise MalformedLayout(
                f"Layout{name} has an empty row at index {index}",
                layout=layout,
                row=index,
            ) from exc
    if not segments:
        name = f" {layout!r}" if layout else ""
        raise MalformedLayout(f"Layout{name} has no rows", layout=layout)
    return " ".join(segments)


def is_css_variable(value: str) -> bool:
    """Whether *value* is entirely a ``var(...)`` reference."""
    return _WHOLE_VAR_PATTERN.match(value.strip()) is not None


def _format_arbitrary_row(row: str) -> str:
    text = row.replace(CELL_SEPARATOR, " ").strip()
    if _ROW_VAR_PATTERN.search(text):
        return text
    return f'"{text}"'


def parse_arbitrary_areas(value: str) -> str:
    """Parse an arbitrary ``grid-areas-[...]`` value into ``grid-template-areas``.

    Never raises: malformed content is passed through for the CSS engine
    to reject.

    Examples:
        >>> parse_arbitrary_areas("header_header,sidebar_main")
        '"header header" "sidebar main"'
        >>> parse_arbitrary_areas("var(--my-areas)")
        'var(--my-areas)'
        >>> parse_arbitrary_areas("a_.,b_var(--x)")
        '"a ." b var(--x)'
        >>> parse_arbitrary_areas("a,,b")
        '"a" "" "b"'
    """
    if is_css_variable(value):
        return value.strip()
    return " ".join(_format_arbitrary_row(row) for row in value.split(ROW_SEPARATOR))


def parse_arbitrary_placement(value: str) -> str:
    """Parse an arbitrary ``grid-area-[...]`` value (``_`` becomes a space)."""
    return value.replace(CELL_SEPARATOR, " ")
