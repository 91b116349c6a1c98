"""Subcommand modules for wedbook.

Provides register_commands() which uses deferred imports to keep
``wedbook --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from wedbook.commands.check import check, tags
    from wedbook.commands.fields import fields

    cli.add_command(check)
    cli.add_command(tags)
    cli.add_command(fields)
