"""apimodel — descriptive data model for REST API metadata."""

from __future__ import annotations

from apimodel.domain.actions import ResourceAction
from apimodel.domain.api import Domain
from apimodel.domain.errors import (
    AlreadyExistsError,
    ApiModelError,
    DuplicateKeyError,
    ResourceNotFoundError,
    UnknownActionError,
    ValidationError,
)
from apimodel.domain.links import ResourceLink
from apimodel.domain.resource import Resource, ResourceKey
from apimodel.domain.shapes import ObjectShapeReference

__version__ = "0.3.0"

__all__ = [
    "AlreadyExistsError",
    "ApiModelError",
    "Domain",
    "DuplicateKeyError",
    "ObjectShapeReference",
    "Resource",
    "ResourceAction",
    "ResourceKey",
    "ResourceLink",
    "ResourceNotFoundError",
    "UnknownActionError",
    "ValidationError",
    "__version__",
]
