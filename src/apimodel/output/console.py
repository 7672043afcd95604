"""Rich Console factory and theme for apimodel output.

Consoles render to a StringIO buffer so renderers can return strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

APIMODEL_THEME = Theme(
    {
        "api.ok": "bold green",
        "api.error": "bold red",
        "api.warning": "bold yellow",
        "api.op": "bold cyan",
        "api.key": "dim",
        "api.href": "bold blue",
        "api.resource": "bold",
        "api.method.GET": "green",
        "api.method.POST": "yellow",
        "api.method.PUT": "blue",
        "api.method.PATCH": "cyan",
        "api.method.DELETE": "red",
        "api.method.OPTIONS": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=APIMODEL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_method(method: str) -> str:
    return f"api.method.{method}" if method in _METHODS else ""


_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"})
