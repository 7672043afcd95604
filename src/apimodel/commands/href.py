"""Commands: derive resource and link hrefs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apimodel.commands._base import ApiCommand, parse_pairs
from apimodel.domain.types import HrefType

if TYPE_CHECKING:
    from apimodel.commands._context import AppContext


@click.command(
    cls=ApiCommand,
    examples="""\
  apimodel href applications 1
  apimodel href applications 1 --type schema
  apimodel href applications 1 --action delete""",
)
@click.argument("name")
@click.argument("version", type=click.IntRange(min=1))
@click.option(
    "-t",
    "--type",
    "href_type",
    type=click.Choice([t.value for t in HrefType]),
    default=None,
    help="Href type (default: [href] default_type from config).",
)
@click.option("-a", "--action", default=None, help="Append this action's sub-path.")
@click.pass_obj
def href(
    app: AppContext,
    name: str,
    version: int,
    href_type: str | None,
    action: str | None,
) -> None:
    """Print the href of a resource."""
    resolved = href_type or app.settings.href.default_type
    app.emit(app.service.href(name, version, href_type=resolved, action=action))


@click.command(
    "link-href",
    cls=ApiCommand,
    examples="""\
  apimodel link-href applications 1 config
  apimodel link-href applications 1 "{id}" -p id=123 -q version=true""",
)
@click.argument("name")
@click.argument("version", type=click.IntRange(min=1))
@click.argument("link_path")
@click.option(
    "-q",
    "--query",
    "query_string",
    multiple=True,
    callback=parse_pairs,
    help="Query parameter as key=value (repeatable).",
)
@click.option(
    "-p",
    "--path-var",
    "path_variables",
    multiple=True,
    callback=parse_pairs,
    help="Path variable as name=value (repeatable).",
)
@click.pass_obj
def link_href(
    app: AppContext,
    name: str,
    version: int,
    link_path: str,
    query_string: dict[str, str] | None,
    path_variables: dict[str, str] | None,
) -> None:
    """Print a link href under a resource's data href."""
    app.emit(
        app.service.link_href(
            name,
            version,
            link_path,
            query_string=query_string,
            path_variables=path_variables,
        )
    )
