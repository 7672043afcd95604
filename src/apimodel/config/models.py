"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, apimodel.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from apimodel.domain.types import HrefType


class DocumentConfig(BaseModel):
    """[document] section."""

    model_config = {"frozen": True}

    path: str = "api.yaml"


class HrefConfig(BaseModel):
    """[href] section."""

    model_config = {"frozen": True}

    default_type: HrefType = HrefType.DATA


class ApiModelConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    document: DocumentConfig = Field(default_factory=DocumentConfig)
    href: HrefConfig = Field(default_factory=HrefConfig)
