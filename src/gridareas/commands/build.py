"""Command: generate the grid-areas stylesheet."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from gridareas.commands._base import GridCommand

if TYPE_CHECKING:
    from gridareas.commands._context import AppContext


@click.command(
    cls=GridCommand,
    examples="""\
  gridareas build
  gridareas build --output static/css/grid-areas.css
  gridareas build --content "templates/**/*.html" --content "src/**/*.jsx"
  gridareas build --stdout > grid-areas.css
  gridareas --json build""",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="CSS file to write (default: [build].output, else stdout).",
)
@click.option(
    "--content",
    multiple=True,
    help="Glob of files to scan for arbitrary-value classes (repeatable).",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print CSS even if an output is configured.")
@click.pass_obj
def build(app: AppContext, output: str | None, content: tuple[str, ...], to_stdout: bool) -> None:
    """Generate CSS for configured layouts, areas, and arbitrary classes."""
    settings = app.settings
    # --output is relative to the CWD, [build].output to the project root
    target: Path | None = None
    if not to_stdout:
        if output:
            target = Path(output)
        elif settings.build.output:
            target = settings.resolve_path(settings.build.output)
    result = app.generator().build(
        output=target,
        content=list(content) if content else None,
    )

    if not result.ok or target is not None or settings.json_output:
        app.emit(result)
        return

    # Pipe-friendly: raw CSS to stdout, warnings to stderr
    click.echo(result.data["css"], nl=False)
    app.warn(result)
