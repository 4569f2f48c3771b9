"""Root CLI group for ministryctl with global flags and command registration."""

from __future__ import annotations

from datetime import date

import click

from ministryctl import __version__
from ministryctl.commands import register_commands
from ministryctl.commands._base import CALENDAR_DATE
from ministryctl.commands._context import AppContext
from ministryctl.config.settings import MinistrySettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="ministryctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (names only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--today",
    type=CALENDAR_DATE,
    default=None,
    help="Reference date for all calculations (default: the host's date).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    today: date | None,
) -> None:
    """ministryctl — church ministry roster, birthday and meeting tool."""
    ctx.ensure_object(dict)
    settings = MinistrySettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        today=today,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
