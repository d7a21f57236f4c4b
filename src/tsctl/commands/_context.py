"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns the service instance and result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tsctl.config.settings import TsSettings
    from tsctl.services.result import ServiceResult
    from tsctl.services.timespec import TimespecService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TsSettings) -> None:
        self.settings = settings
        self._service: TimespecService | None = None

        from tsctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> TimespecService:
        """The time value service (created on first access)."""
        if self._service is None:
            from tsctl.services.timespec import TimespecService

            self._service = TimespecService(self.settings.arith)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they
          don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            show_total_ns=self.settings.output.show_total_ns,
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
