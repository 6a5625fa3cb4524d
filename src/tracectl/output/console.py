"""Rich Console factory and theme for tracectl output.

Consoles render into a StringIO buffer so renderers keep a plain
``render_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich leaves out color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TRACECTL_THEME = Theme(
    {
        "tt.ok": "bold green",
        "tt.error": "bold red",
        "tt.warning": "bold yellow",
        "tt.op": "bold cyan",
        "tt.key": "dim",
        "tt.id": "bold blue",
        "tt.path": "dim",
        "tt.header": "bold",
        "tt.true": "green",
        "tt.false": "dim",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TRACECTL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_cell(value: str) -> str:
    """Return the Rich style for a table cell, keyed on boolean text."""
    if value == "true":
        return "tt.true"
    if value == "false":
        return "tt.false"
    return ""
