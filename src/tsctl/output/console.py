"""Rich Console factory and theme for tsctl output.

Consoles render into a StringIO buffer so callers get a plain string back.
In non-TTY environments (tests, pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TS_THEME = Theme(
    {
        "ts.ok": "bold green",
        "ts.error": "bold red",
        "ts.warning": "bold yellow",
        "ts.op": "bold cyan",
        "ts.key": "dim",
        "ts.value": "bold",
        "ts.negative": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
