"""Rich Console factory and theme for hrtracker output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

HRT_THEME = Theme(
    {
        "hrt.ok": "bold green",
        "hrt.error": "bold red",
        "hrt.warning": "bold yellow",
        "hrt.op": "bold cyan",
        "hrt.key": "dim",
        "hrt.name": "bold blue",
        "hrt.path": "dim",
        "hrt.when": "bold",
        "hrt.due": "green",
        "hrt.overdue": "bold red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=HRT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_remaining(overdue: bool) -> str:
    """Return the Rich style for a remaining-time value."""
    return "hrt.overdue" if overdue else "hrt.due"
