"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Centralizes output emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from wedbook.output.formatters import OutputSettings, format_constraints, format_result

if TYPE_CHECKING:
    from wedbook.config.settings import WedbookSettings
    from wedbook.parsing.result import ParseResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: WedbookSettings) -> None:
        self.settings = settings

        from wedbook.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.use_json_logs)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.output.color,
            width=self.settings.output.width,
        )

    def emit(self, result: ParseResult[Any]) -> None:
        """Format and output a ParseResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output_settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_constraints(self, constraints: dict[str, str]) -> None:
        click.echo(format_constraints(constraints, settings=self.output_settings))
