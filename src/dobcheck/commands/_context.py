"""AppContext — shared Click context for all commands.

Created once by the root group and handed to subcommands through
``@click.pass_obj``. Configures logging and owns result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dobcheck.config.logging import configure_logging
from dobcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dobcheck.config.settings import DobSettings
    from dobcheck.services.result import ServiceResult


class AppContext:
    """Shared state flowing through Click's command hierarchy."""

    def __init__(self, settings: DobSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def interactive(self) -> bool:
        return not self.settings.no_interact

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult with the right exit semantics.

        * Success: stdout; warnings go to stderr outside JSON mode.
        * Failure: stderr, then exit code 1.
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
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
