"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from apimodel.output.console import create_console, get_output, style_for_method

if TYPE_CHECKING:
    from rich.console import Console

    from apimodel.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="api.ok"), Text(f"  {result.op}", style="api.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "api.href" if key in ("href", "base_url") else ""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="api.key"), Text(str(value), style=style))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_href(result: ServiceResult, console: Console) -> None:
    # Bare href so the output can be piped straight into curl.
    console.print(Text(result.data["href"], style="api.href"), soft_wrap=True)


def _render_resources(result: ServiceResult, console: Console) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("No resources declared.", style="api.warning"))
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Resource", style="api.resource")
    table.add_column("Version", justify="right")
    table.add_column("Actions")
    table.add_column("Links")
    table.add_column("Tags", style="dim")
    for item in items:
        table.add_row(
            item["name"],
            str(item["version"]),
            ", ".join(item["actions"]),
            ", ".join(item["links"]),
            ", ".join(item["tags"]),
        )
    console.print(table)


def _render_resource(result: ServiceResult, console: Console) -> None:
    data = result.data
    console.print(Text(f"{data['name']} v{data['version']}", style="api.resource"))
    _field(console, "href", data["href"])
    if data.get("description"):
        _field(console, "description", data["description"])
    shape = data["objectShape"]
    _field(console, "shape", f"{shape['namespace']} {shape['type']}@{shape['version']}")
    if data.get("tags"):
        _field(console, "tags", ", ".join(data["tags"]))

    if data.get("actions"):
        table = Table(title="Actions", show_header=True, header_style="bold")
        table.add_column("Name")
        table.add_column("Method")
        table.add_column("Path")
        table.add_column("Auth", style="dim")
        for action in data["actions"]:
            table.add_row(
                action["name"],
                Text(action["method"], style=style_for_method(action["method"])),
                action.get("path", ""),
                ", ".join(action.get("auth", [])),
            )
        console.print(table)

    if data.get("links"):
        table = Table(title="Links", show_header=True, header_style="bold")
        table.add_column("Rel")
        table.add_column("Href", style="api.href")
        table.add_column("Title")
        for link in data["links"]:
            table.add_row(link["rel"], link["href"], link["title"])
        console.print(table)


def _render_error(result: ServiceResult, console: Console) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="api.error"),
        Text(f"  {result.op}", style="api.op"),
        Text(f"  {message}"),
    )
    if error is None:
        return
    for item in error.detail.get("errors", []):
        console.print(Text(f"  - {item}", style="api.key"))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "href": _render_href,
    "link_href": _render_href,
    "list_resources": _render_resources,
    "show_resource": _render_resource,
}
