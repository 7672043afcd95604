"""Root CLI group for apimodel with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from apimodel import __version__
from apimodel.commands import register_commands
from apimodel.commands._context import AppContext
from apimodel.config.settings import ApiModelSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="apimodel")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-d",
    "--document",
    "document_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Declarative document (default: [document] path from config).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    document_file: Path | None,
) -> None:
    """apimodel: inspect REST API model documents and derive hrefs."""
    settings = ApiModelSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        verbose=verbose or None,
        log_json=log_json or None,
        document_file=document_file,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
