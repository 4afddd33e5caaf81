"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gridareas.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gridareas.config.settings import GridAreasSettings
    from gridareas.services.generate import GenerateService
    from gridareas.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GridAreasSettings) -> None:
        self.settings = settings

        from gridareas.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def generator(self) -> GenerateService:
        """A GenerateService bound to these settings."""
        from gridareas.services.generate import GenerateService

        return GenerateService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr so they never
          end up in piped CSS.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                self.warn(result)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def warn(self, result: ServiceResult) -> None:
        """Echo a result's warnings to stderr."""
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
