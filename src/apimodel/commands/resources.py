"""Commands: list resources and show one resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apimodel.commands._base import ApiCommand

if TYPE_CHECKING:
    from apimodel.commands._context import AppContext


@click.command(
    cls=ApiCommand,
    examples="""\
  apimodel resources
  apimodel --json resources""",
)
@click.pass_obj
def resources(app: AppContext) -> None:
    """List every resource with its actions and links."""
    app.emit(app.service.list_resources())


@click.command(
    cls=ApiCommand,
    examples="""\
  apimodel show applications 1
  apimodel --json show applications 2""",
)
@click.argument("name")
@click.argument("version", type=click.IntRange(min=1))
@click.pass_obj
def show(app: AppContext, name: str, version: int) -> None:
    """Show one resource in full."""
    app.emit(app.service.show_resource(name, version))
