"""Rich Console factory and theme for wedbook output.

Consoles render to a StringIO buffer so formatters can return plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WEDBOOK_THEME = Theme(
    {
        "wb.ok": "bold green",
        "wb.error": "bold red",
        "wb.field": "bold cyan",
        "wb.key": "dim",
        "wb.value": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=WEDBOOK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
