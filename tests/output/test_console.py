"""Tests for the Rich console factory."""

from wedbook.output.console import WEDBOOK_THEME, create_console, get_output


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_width_override(self) -> None:
        assert create_console(width=42).width == 42

    def test_default_width(self) -> None:
        assert create_console().width == 100

    def test_theme_styles(self) -> None:
        assert "wb.ok" in WEDBOOK_THEME.styles
        assert "wb.error" in WEDBOOK_THEME.styles
