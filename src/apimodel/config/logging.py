"""structlog setup shared by the CLI and library modules.

Library code logs through ``logging.getLogger(__name__)``. A single
stderr handler on the root logger renders both stdlib records and native
structlog events, as console text or (``--log-json``) JSON lines.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

LOGGER_NAME = "apimodel"


class _ApiModelHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker type so reconfiguration replaces only our own handler."""


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route apimodel logging to stderr.

    Args:
        verbose: Log DEBUG and up from ``apimodel.*``; WARNING and up otherwise.
        log_json: Render JSON lines instead of console text.
    """
    shared = _processors()
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = _ApiModelHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _ApiModelHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_document(path: Path) -> None:
    """Tag every subsequent log event with the document being served."""
    structlog.contextvars.bind_contextvars(document=str(path))
