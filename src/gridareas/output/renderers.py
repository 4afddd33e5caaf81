"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from gridareas.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from gridareas.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_item_key(item) for item in items if _item_key(item))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_key(item: Any) -> str:
    if isinstance(item, dict):
        for key in ("area", "class"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _field(console: Console, key: str, value: object, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "grid.key"), (str(value), style)))


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "grid.ok"), (f"  {result.op}", "grid.op")))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    message = result.error.message if result.error else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "grid.error"), (f"  {result.op}", "grid.op"), f"  {message}")
    )
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        shown = json.dumps(value, separators=(",", ":")) if isinstance(value, dict | list) else value
        _field(console, key, shown)


# ── Operation renderers ───────────────────────────────────────────────


def _render_build(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    data = result.data
    for key in ("layouts", "areas", "rules", "arbitrary", "files_scanned"):
        if key in data:
            _field(console, key, data[key])
    if "output" in data:
        _field(console, "output", data["output"], "grid.path")


def _render_areas(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("No areas defined. Add layouts under [layouts] in gridareas.toml."))
        return

    table = Table(title=f"Grid areas ({len(items)})", show_lines=False)
    table.add_column("Area", style="grid.area")
    table.add_column("Layouts", style="grid.layout")
    if verbose:
        table.add_column("Classes", style="grid.class")
    for item in items:
        row = [escape(item["area"]), escape(", ".join(item["layouts"]))]
        if verbose:
            row.append(escape(" ".join(item["classes"])))
        table.add_row(*row)
    console.print(table)


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    for index, item in enumerate(items):
        if index:
            console.print()
        console.print(Text(item["css"]), soft_wrap=True)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "build": _render_build,
    "list_areas": _render_areas,
    "resolve": _render_resolve,
}
