"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy store initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hrtracker.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from hrtracker.config.settings import HrtrackerSettings
    from hrtracker.infrastructure.store import ScheduleStore
    from hrtracker.services.result import ServiceResult
    from hrtracker.services.schedule import ScheduleService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is created on first use so ``--help`` and ``--version``
    never touch the schedule directory.
    """

    def __init__(self, settings: HrtrackerSettings) -> None:
        self.settings = settings
        self._store: ScheduleStore | None = None

        from hrtracker.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> ScheduleStore:
        """The schedule store (created lazily on first access)."""
        if self._store is None:
            from hrtracker.infrastructure.store import ScheduleStore

            self._store = ScheduleStore(
                self.settings.schedule_root,
                create_missing=self.settings.storage.create_missing,
            )
        return self._store

    @property
    def schedules(self) -> ScheduleService:
        from hrtracker.services.schedule import ScheduleService

        return ScheduleService(self.store)

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
