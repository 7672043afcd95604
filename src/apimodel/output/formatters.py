"""Rich/JSON output selection.

Humans get Rich output from :mod:`apimodel.output.renderers`; machines
get the serialized ServiceResult with ``--json``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apimodel.output.renderers import render_result

if TYPE_CHECKING:
    from apimodel.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    return render_result(result)
