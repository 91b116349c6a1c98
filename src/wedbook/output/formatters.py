"""Rich/JSON output for ParseResult.

The CLI renders results for humans (Rich text) or machines (--json).
Constraint messages are printed verbatim, never reworded or wrapped in
markup.
"""

from __future__ import annotations

import json as _json
from collections.abc import Set
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from wedbook.domain.index import Index
from wedbook.domain.values import FieldValue
from wedbook.output.console import create_console, get_output

if TYPE_CHECKING:
    from wedbook.parsing.result import ParseResult


class OutputSettings(BaseModel):
    """How results should be rendered."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True
    width: int = 100


def display_value(value: Any) -> Any:
    """Reduce a parsed value to plain JSON-friendly data.

    Examples:
        >>> display_value(Index.from_one_based(3))
        3
    """
    if isinstance(value, Index):
        return value.one_based
    if isinstance(value, FieldValue):
        return value.value
    if isinstance(value, Set):
        return sorted(display_value(v) for v in value)
    return value


def _render_human(result: ParseResult[Any], settings: OutputSettings) -> str:
    console = create_console(no_color=not settings.color, width=settings.width)
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        line = Text()
        line.append("ERROR", style="wb.error")
        line.append(": ")
        line.append(result.field, style="wb.field")
        line.append(" - ")
        line.append(msg)
        console.print(line, soft_wrap=True)
        return get_output(console).rstrip("\n")

    value = display_value(result.value)
    if settings.quiet:
        shown = "\n".join(value) if isinstance(value, list) else str(value)
        console.print(Text(shown), soft_wrap=True)
        return get_output(console).rstrip("\n")

    header = Text()
    header.append("OK", style="wb.ok")
    header.append(": ")
    header.append(result.field, style="wb.field")
    console.print(header)
    body = Text("  ")
    body.append("value: ", style="wb.key")
    body.append(_json.dumps(value) if isinstance(value, list) else str(value), style="wb.value")
    console.print(body, soft_wrap=True)
    if settings.verbose:
        console.print(Text(f"  type: {type(result.value).__name__}", style="wb.key"))
    return get_output(console).rstrip("\n")


def format_result(result: ParseResult[Any], *, settings: OutputSettings | None = None) -> str:
    """Format a ParseResult for display.

    Args:
        result: The parse result to format.
        settings: Output mode; defaults to human-readable.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        payload = {
            "ok": result.ok,
            "field": result.field,
            "value": display_value(result.value),
            "error": result.error.model_dump() if result.error else None,
        }
        return _json.dumps(payload, indent=2)
    return _render_human(result, settings)


def format_constraints(constraints: dict[str, str], *, settings: OutputSettings | None = None) -> str:
    """Format a ``{kind: constraint message}`` listing."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps(constraints, indent=2)
    if settings.quiet:
        return "\n".join(constraints)

    console = create_console(no_color=not settings.color, width=settings.width)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="wb.field", no_wrap=True)
    table.add_column("Constraint")
    for kind, message in constraints.items():
        table.add_row(kind, Text(message))
    console.print(table)
    return get_output(console).rstrip("\n")
