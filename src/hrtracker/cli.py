"""Root CLI group for hrtracker with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from hrtracker import __version__
from hrtracker.commands import register_commands
from hrtracker.commands._context import AppContext
from hrtracker.config.settings import HrtrackerSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hrtracker")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-d",
    "--dir",
    "schedule_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Schedule directory (default: ~/.hrtracker).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    schedule_dir: Path | None,
) -> None:
    """hrtracker — recurring schedules you step through by hand.

    With no command, lists every schedule.
    """
    settings = HrtrackerSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        schedule_dir=schedule_dir,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from hrtracker.commands.list_cmd import list_cmd

        ctx.invoke(list_cmd)


register_commands(cli)
