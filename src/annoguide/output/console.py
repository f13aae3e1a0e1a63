"""Rich Console factory and theme for annoguide output.

Consoles render into a StringIO buffer so formatters keep a
``format_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

APP_THEME = Theme(
    {
        "app.ok": "bold green",
        "app.error": "bold red",
        "app.op": "bold cyan",
        "app.key": "dim",
        "app.section": "bold",
        "app.field": "bold yellow",
        "app.pattern": "magenta",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(file=StringIO(), theme=APP_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
