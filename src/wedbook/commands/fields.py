"""Command: list field kinds and their constraint messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wedbook.commands._base import WedbookCommand
from wedbook.domain.types import FieldKind

if TYPE_CHECKING:
    from wedbook.commands._context import AppContext


@click.command(
    cls=WedbookCommand,
    examples="""\
  wedbook fields
  wedbook --json fields""",
)
@click.pass_obj
def fields(app: AppContext) -> None:
    """List every field kind with the message shown when it is rejected."""
    from wedbook.parsing.fields import constraint_message

    app.emit_constraints({kind.value: constraint_message(kind) for kind in FieldKind})
