"""Subcommand modules for apimodel.

Provides register_commands() which uses deferred imports to keep
``apimodel --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from apimodel.commands.href import href, link_href
    from apimodel.commands.resources import resources, show
    from apimodel.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(resources)
    cli.add_command(show)
    cli.add_command(href)
    cli.add_command(link_href)
