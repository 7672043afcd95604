"""Error taxonomy for the API model.

Every error carries a stable ``code`` and a JSON-serializable ``detail``
dict so that the service layer can turn it into a ``ServiceError``
without inspecting the concrete type.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar


class ApiModelError(Exception):
    """Base class for all model errors."""

    code: ClassVar[str] = "API_MODEL_ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail or {}


class ValidationError(ApiModelError, ValueError):
    """A declarative record failed required-field, type, or pattern checks.

    Attributes:
        errors: One ``"<field path>: <message>"`` string per failure.
    """

    code: ClassVar[str] = "VALIDATION_ERROR"

    def __init__(self, entity: str, errors: Iterable[str]) -> None:
        self.entity = entity
        self.errors: list[str] = list(errors)
        message = f"Invalid {entity}: " + "; ".join(self.errors)
        super().__init__(message, detail={"entity": entity, "errors": self.errors})


class DuplicateKeyError(ApiModelError):
    """A uniqueness invariant was violated.

    Attributes:
        keys: Every duplicated key, in first-seen order.
    """

    code: ClassVar[str] = "DUPLICATE_KEY"

    def __init__(self, what: str, keys: Iterable[str]) -> None:
        self.what = what
        self.keys: list[str] = list(keys)
        message = f"{what} must be unique - duplicates: {', '.join(self.keys)}"
        super().__init__(message, detail={"what": what, "keys": self.keys})


class AlreadyExistsError(DuplicateKeyError):
    """An ``add_*`` call targeted a key that is already indexed."""

    code: ClassVar[str] = "ALREADY_EXISTS"

    def __init__(self, what: str, key: str) -> None:
        super().__init__(what, [key])
        self.key = key
        self.message = f"{what} already exists: {key}"
        self.args = (self.message,)


class ResourceNotFoundError(ApiModelError, LookupError):
    """Href derivation referenced an unknown ``(name, version)``."""

    code: ClassVar[str] = "RESOURCE_NOT_FOUND"

    def __init__(self, name: str, version: int) -> None:
        self.name = name
        self.version = version
        super().__init__(
            f"resource not found: {name}/{version}",
            detail={"name": name, "version": version},
        )


class UnknownActionError(ApiModelError, LookupError):
    """A path was requested for an action the resource does not declare."""

    code: ClassVar[str] = "UNKNOWN_ACTION"

    def __init__(self, resource: str, action: str) -> None:
        self.resource = resource
        self.action = action
        super().__init__(
            f"invalid action: {action} (resource {resource})",
            detail={"resource": resource, "action": action},
        )


class DocumentError(ApiModelError):
    """A declarative document could not be read or parsed."""

    code: ClassVar[str] = "DOCUMENT_ERROR"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}", detail={"path": path, "reason": reason})
