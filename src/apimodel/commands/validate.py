"""Command: validate the declarative document."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apimodel.commands._base import ApiCommand

if TYPE_CHECKING:
    from apimodel.commands._context import AppContext


@click.command(
    cls=ApiCommand,
    examples="""\
  apimodel validate
  apimodel -d services/api.yaml validate
  apimodel --json validate""",
)
@click.pass_obj
def validate(app: AppContext) -> None:
    """Check that the document declares a valid domain."""
    app.emit(app.service.validate())
