"""The ``wedbook`` command: resolve settings once, then hand off to a subcommand."""

from __future__ import annotations

import click

from wedbook import __version__
from wedbook.commands import register_commands
from wedbook.commands._context import AppContext
from wedbook.config.discovery import ConfigFileError
from wedbook.config.settings import WedbookSettings

# Flags that mirror a WedbookSettings field of the same name.
_SETTING_FLAGS = ("json_output", "quiet", "verbose", "log_json")


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the parsed value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and value types.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read settings from this TOML file instead of wedbook.toml.",
)
@click.version_option(__version__, prog_name="wedbook")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Check contact and wedding fields the way the planner does.

    Settings come from CLI flags, then WEDBOOK_* environment variables,
    then wedbook.toml. A flag left off does not override the other two.
    """
    given = {name: True for name in _SETTING_FLAGS if flags[name]}
    try:
        settings = WedbookSettings.from_cli(config_path=config_path, **given)
    except ConfigFileError as exc:
        raise click.ClickException(str(exc)) from exc

    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
