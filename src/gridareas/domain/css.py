"""Render declaration records as CSS text.

Selectors are stored unescaped (``.grid-areas-[a_b]``) and escaped here.
Nested bodies render as nested blocks, which is how at-rules arrive.
"""

from __future__ import annotations

from collections.abc import Mapping

from gridareas.domain.classnames import escape_class_name
from gridareas.domain.declarations import CssBody

INDENT = "  "


def escape_selector(selector: str) -> str:
    """Escape a single-class selector; other selectors pass through."""
    if selector.startswith(".") and " " not in selector:
        return f".{escape_class_name(selector[1:])}"
    return selector


def _render_body(body: CssBody, depth: int) -> list[str]:
    pad = INDENT * depth
    lines: list[str] = []
    for key, value in body.items():
        if isinstance(value, Mapping):
            lines.append(f"{pad}{key} {{")
            lines.extend(_render_body(value, depth + 1))
            lines.append(f"{pad}}}")
        else:
            lines.append(f"{pad}{key}: {value};")
    return lines


def render_rule(selector: str, body: CssBody) -> str:
    """Render one rule block.

    Examples:
        >>> print(render_rule(".grid-area-main", {"grid-area": "main"}))
        .grid-area-main {
          grid-area: main;
        }
    """
    lines = [f"{escape_selector(selector)} {{", *_render_body(body, 1), "}"]
    return "\n".join(lines)


def render_stylesheet(rules: Mapping[str, CssBody]) -> str:
    """Render rules in insertion order, separated by blank lines."""
    if not rules:
        return ""
    return "\n\n".join(render_rule(selector, body) for selector, body in rules.items()) + "\n"
