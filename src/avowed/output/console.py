"""Rich console setup for human-readable output.

Renderers draw into a console backed by an in-memory buffer and hand back
the text, so the CLI decides where it is printed. Rich drops colour codes on
its own when the real stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

AVOWED_THEME = Theme(
    {
        "avw.ok": "bold green",
        "avw.error": "bold red",
        "avw.warning": "bold yellow",
        "avw.op": "bold cyan",
        "avw.key": "dim",
        "avw.field": "bold blue",
        "avw.code": "magenta",
        "avw.kind.int": "yellow",
        "avw.kind.string": "green",
    }
)


def create_console(*, no_color: bool = False, width: int = DEFAULT_WIDTH) -> Console:
    """Buffered console using :data:`AVOWED_THEME`; highlighting is off."""
    return Console(
        file=StringIO(),
        theme=AVOWED_THEME,
        width=width,
        no_color=no_color,
        highlight=False,
    )


def get_output(console: Console) -> str:
    """Everything written to a console made by :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console is not backed by a StringIO buffer"
        raise TypeError(msg)
    return buffer.getvalue()


def style_for_kind(kind: str) -> str:
    """Theme style for a field kind name, or ``""`` for anything else."""
    return f"avw.kind.{kind}" if kind in ("int", "string") else ""
