"""Commands: parse a single field or a batch of tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wedbook.commands._base import WedbookCommand
from wedbook.domain.types import FieldKind

if TYPE_CHECKING:
    from wedbook.commands._context import AppContext

SCALAR_KINDS = [kind.value for kind in FieldKind if kind is not FieldKind.TAGS]


@click.command(
    cls=WedbookCommand,
    examples="""\
  wedbook check name "  Alice Tan  "
  wedbook check email alice@example.com
  wedbook check datetime 14/02/2025
  wedbook --json check phone 12
  wedbook check index -- -5""",
)
@click.argument("kind", type=click.Choice(SCALAR_KINDS))
@click.argument("raw")
@click.pass_obj
def check(app: AppContext, kind: str, raw: str) -> None:
    """Parse RAW as a KIND field and report the value or the constraint it breaks."""
    from wedbook.parsing.fields import parse_field

    app.emit(parse_field(kind, raw))


@click.command(
    cls=WedbookCommand,
    examples="""\
  wedbook tags friend colleague
  wedbook tags friend friend
  wedbook --quiet tags vendor florist""",
)
@click.argument("raws", nargs=-1)
@click.pass_obj
def tags(app: AppContext, raws: tuple[str, ...]) -> None:
    """Parse every RAWS value as a tag; fail on the first invalid one."""
    from wedbook.parsing.fields import parse_tags

    app.emit(parse_tags(raws))
