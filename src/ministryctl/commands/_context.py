"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Holds the settings and the reference clock, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ministryctl.infrastructure.clock import Clock, clock_for
from ministryctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from ministryctl.config.settings import MinistrySettings
    from ministryctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The roster is never
    read here; services load it lazily so ``--help`` stays cheap.
    """

    def __init__(self, settings: MinistrySettings) -> None:
        self.settings = settings
        self.clock: Clock = clock_for(settings.today)

        from ministryctl.config.logging import bind_run_context, configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        bind_run_context(today=self.clock.today().isoformat(), roster=settings.roster_path)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
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
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
