"""Rich Console factory and theme for dobcheck output.

Consoles render into a StringIO buffer so renderers keep the
``format_result() -> str`` contract. Outside a terminal (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DOB_THEME = Theme(
    {
        "dob.ok": "bold green",
        "dob.error": "bold red",
        "dob.warning": "bold yellow",
        "dob.op": "bold cyan",
        "dob.key": "dim",
        "dob.date": "bold blue",
        "dob.pass": "bold green",
        "dob.fail": "bold red",
        "dob.number": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width for stable output.
    """
    return Console(
        file=StringIO(),
        theme=DOB_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def verdict_style(passed: bool) -> str:
    return "dob.pass" if passed else "dob.fail"
