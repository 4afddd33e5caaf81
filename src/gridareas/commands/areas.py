"""Command: list area names discovered in the configured layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gridareas.commands._base import GridCommand

if TYPE_CHECKING:
    from gridareas.commands._context import AppContext


@click.command(
    cls=GridCommand,
    examples="""\
  gridareas areas
  gridareas -v areas
  gridareas -q areas
  gridareas --json areas""",
)
@click.pass_obj
def areas(app: AppContext) -> None:
    """List grid areas and the layouts that define them."""
    app.emit(app.generator().list_areas())
