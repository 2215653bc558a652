"""Rich Console factory and theme for oopnotes output.

Consoles render into a StringIO buffer so every renderer returns a plain
string. Outside a terminal (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NOTES_THEME = Theme(
    {
        "oop.ok": "bold green",
        "oop.error": "bold red",
        "oop.warning": "bold yellow",
        "oop.op": "bold cyan",
        "oop.key": "dim",
        "oop.id": "bold blue",
        "oop.title": "bold",
        "oop.category.oop": "green",
        "oop.category.solid": "magenta",
        "oop.category.creational": "yellow",
        "oop.status.pass": "green",
        "oop.status.fail": "bold red",
        "oop.status.error": "bold red",
        "oop.status.invalid": "bold red",
        "oop.status.missing_output": "yellow",
        "oop.status.skipped": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=NOTES_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    return f"oop.category.{category}" if category in ("oop", "solid", "creational") else ""


def style_for_status(status: str) -> str:
    return f"oop.status.{status}"
