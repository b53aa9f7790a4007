"""Rich console setup shared by the renderers.

Renderers print into an in-memory console and hand back a string, so
the CLI decides where it goes (stdout or stderr). Without a terminal
Rich emits no escape codes, which keeps piped output and tests plain.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

NOTE_THEME = Theme(
    {
        # status
        "note.ok": "bold green",
        "note.error": "bold red",
        "note.warning": "bold yellow",
        "note.op": "bold cyan",
        # fields
        "note.key": "dim",
        "note.id": "bold blue",
        "note.path": "dim",
        "note.title": "bold",
        "note.category": "magenta",
        # reference lines
        "note.outgoing": "green",
        "note.incoming": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """A console that records into a string buffer."""
    return Console(
        file=StringIO(),
        theme=NOTE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console made by :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()
