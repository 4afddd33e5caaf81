"""Subcommand modules for gridareas.

register_commands() defers imports so ``gridareas --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from gridareas.commands.areas import areas
    from gridareas.commands.build import build
    from gridareas.commands.resolve import resolve

    cli.add_command(build)
    cli.add_command(areas)
    cli.add_command(resolve)
