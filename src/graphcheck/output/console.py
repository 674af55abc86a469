"""Rich Console factory and theme for graphcheck output.

Consoles render into a StringIO buffer so renderers can keep the
``format_result() -> str`` contract. Rich drops color codes by itself in
non-TTY environments (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GC_THEME = Theme(
    {
        "gc.ok": "bold green",
        "gc.error": "bold red",
        "gc.warning": "bold yellow",
        "gc.op": "bold cyan",
        "gc.key": "dim",
        "gc.vertex": "bold blue",
        "gc.yes": "green",
        "gc.no": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=GC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def verdict_style(value: bool) -> str:
    return "gc.yes" if value else "gc.no"
