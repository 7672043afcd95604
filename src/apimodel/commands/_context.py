"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns the lazily created DomainService and the
result emission rules (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apimodel.config.logging import bind_document, configure_logging
from apimodel.output.formatters import format_result

if TYPE_CHECKING:
    from apimodel.config.settings import ApiModelSettings
    from apimodel.services.domain import DomainService
    from apimodel.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is created on first use so ``--help`` and ``--version``
    never touch the document.
    """

    def __init__(self, settings: ApiModelSettings) -> None:
        self.settings = settings
        self._service: DomainService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> DomainService:
        if self._service is None:
            from apimodel.services.domain import DomainService

            document = self.settings.resolve_document()
            bind_document(document)
            self._service = DomainService(document)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return. Warnings go to stderr so they
          don't pollute piped output.
        * Failure: stderr, exit code 1.
        """
        json_output = self.settings.json_output
        output = format_result(result, json_output=json_output)
        if result.ok:
            click.echo(output)
            if not json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
