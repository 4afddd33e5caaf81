"""Command: show the CSS rule behind utility class names."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gridareas.commands._base import GridCommand

if TYPE_CHECKING:
    from gridareas.commands._context import AppContext


@click.command(
    cls=GridCommand,
    examples="""\
  gridareas resolve grid-areas-page
  gridareas resolve "grid-areas-[header_header,sidebar_main]"
  gridareas --json resolve "grid-areas-[var(--areas)]"
  gridareas resolve row-span-main col-start-[main-start]""",
)
@click.argument("class_names", nargs=-1, required=True)
@click.pass_obj
def resolve(app: AppContext, class_names: tuple[str, ...]) -> None:
    """Resolve utility class names (static or [arbitrary]) to CSS."""
    app.emit(app.generator().resolve(list(class_names)))
