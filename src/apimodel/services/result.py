"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: every public DomainService method returns a ServiceResult;
model errors never escape as exceptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from apimodel.domain.errors import ApiModelError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: ApiModelError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"href"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues found along the way.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: ApiModelError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
