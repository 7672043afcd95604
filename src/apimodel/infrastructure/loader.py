"""Declarative document loading.

Turns a YAML, JSON, or TOML file into the plain mapping that
:class:`~apimodel.domain.api.Domain` accepts. Parsing is the only job
here; all validation happens in the domain layer.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from apimodel.domain.api import Domain
from apimodel.domain.errors import DocumentError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
SUPPORTED_SUFFIXES = YAML_SUFFIXES | {".json", ".toml"}


def _parse_yaml(text: str) -> Any:
    # Safe loader: plain dicts/lists, no arbitrary object construction.
    return YAML(typ="safe", pure=True).load(text)


def parse_document(text: str, suffix: str, *, source: str = "<string>") -> dict[str, Any]:
    """Parse *text* according to *suffix* and return the top-level mapping.

    Raises:
        DocumentError: If the suffix is unsupported, the text does not
            parse, or the top level is not a mapping.
    """
    suffix = suffix.lower()
    try:
        if suffix in YAML_SUFFIXES:
            data = _parse_yaml(text)
        elif suffix == ".json":
            data = json.loads(text)
        elif suffix == ".toml":
            data = tomllib.loads(text)
        else:
            supported = ", ".join(sorted(SUPPORTED_SUFFIXES))
            raise DocumentError(source, f"unsupported format {suffix!r} (expected {supported})")
    except (YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise DocumentError(source, f"parse error: {exc}") from exc

    if not isinstance(data, dict):
        raise DocumentError(source, f"top level must be a mapping, got {type(data).__name__}")
    return data


def load_document(path: Path) -> dict[str, Any]:
    """Read and parse the document at *path*.

    Raises:
        DocumentError: If the file is missing, unreadable, or malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise DocumentError(str(path), f"not valid UTF-8: {exc.reason}") from exc
    logger.debug("Loaded document %s (%d bytes)", path, len(text))
    return parse_document(text, path.suffix, source=str(path))


def load_domain(path: Path) -> Domain:
    """Load the document at *path* and construct a :class:`Domain` from it."""
    return Domain(load_document(path))
