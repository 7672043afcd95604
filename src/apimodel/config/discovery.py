"""Locate and read ``apimodel.toml``.

Lookup order: the ``APIMODEL_CONFIG`` env var, then the nearest
``apimodel.toml`` in the start directory or any of its ancestors.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from apimodel.config.models import ApiModelConfig
from apimodel.domain.errors import DocumentError
from apimodel.domain.validation import validate_record

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "apimodel.toml"
CONFIG_ENV_VAR = "APIMODEL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    A set ``APIMODEL_CONFIG`` disables the walk-up even when it names a
    missing file.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        if path.is_file():
            return path
        logger.warning("%s points at a missing file: %s", CONFIG_ENV_VAR, path)
        return None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            logger.debug("Using config %s", candidate)
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse the TOML file at *path*.

    Raises:
        DocumentError: If the file cannot be read or is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DocumentError(str(path), exc.strerror or str(exc)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise DocumentError(str(path), f"invalid TOML: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> ApiModelConfig:
    """Read and validate a config file, discovering it from *cwd* when *path* is None.

    No file at all yields the defaults.

    Raises:
        DocumentError: If the file is unreadable or not valid TOML.
        ValidationError: If a section holds an invalid value.
    """
    path = path or find_config(cwd)
    if path is None:
        return ApiModelConfig()
    return validate_record(ApiModelConfig, read_toml(path), entity="config")
