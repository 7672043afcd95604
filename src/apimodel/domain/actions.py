"""ResourceAction — one HTTP operation on a resource."""

from __future__ import annotations

from typing import Annotated, Any, Self

from pydantic import BaseModel, StringConstraints, field_validator

from apimodel.domain.hrefs import normalize_path
from apimodel.domain.shapes import ObjectShapeReference
from apimodel.domain.types import HttpMethod
from apimodel.domain.validation import RECORD_CONFIG, dump_record, validate_record


class ResourceAction(BaseModel):
    """An action declared by a resource, unique by ``name`` within it.

    ``path`` is the sub-path appended to the resource path. It is stored
    normalized: empty, or starting with ``/``.

    Document form::

        name: delete
        title: Delete
        method: DELETE
        path: "{id}"
        auth: [hawk]
        responseShape: {namespace: ns://..., version: 1.0.0, type: Result}
    """

    model_config = RECORD_CONFIG

    name: Annotated[str, StringConstraints(min_length=1)]
    title: Annotated[str, StringConstraints(min_length=1)]
    method: HttpMethod
    path: str = ""
    auth: tuple[str, ...] = ()
    request_query_shape: ObjectShapeReference | None = None
    request_payload_shape: ObjectShapeReference | None = None
    response_shape: ObjectShapeReference | None = None

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, value: str) -> str:
        return normalize_path(value)

    @classmethod
    def from_record(cls, record: Any) -> Self:
        """Validate a declarative record into an action.

        Raises:
            ValidationError: If ``name``, ``title`` or ``method`` is missing
                or any field is malformed.
        """
        return validate_record(cls, record, entity="action")

    def to_record(self) -> dict[str, Any]:
        return dump_record(self)
