"""WedbookCommand: a click Command that can print its own usage examples.

``--help`` stays short; ``check --examples`` prints ready-to-paste
invocations and exits without parsing anything.
"""

from __future__ import annotations

from typing import Any

import click


class WedbookCommand(click.Command):
    """Command taking an ``examples=`` keyword, exposed as ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self._examples_param = self._examples_option() if examples else None

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params = super().get_params(ctx)
        if self._examples_param is not None:
            # After the declared parameters, ahead of --help.
            params.insert(len(self.params), self._examples_param)
        return params

    def _examples_option(self) -> click.Option:
        return click.Option(
            ["--examples"],
            is_flag=True,
            is_eager=True,
            expose_value=False,
            callback=self._print_examples,
            help="Print example invocations and exit.",
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(self.examples)
        ctx.exit(0)
