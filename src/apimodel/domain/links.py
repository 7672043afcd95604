"""ResourceLink — one hyperlink relation exposed by a resource."""

from __future__ import annotations

from typing import Annotated, Any, Self

from pydantic import BaseModel, StringConstraints

from apimodel.domain.shapes import ObjectShapeReference
from apimodel.domain.validation import RECORD_CONFIG, dump_record, validate_record


class ResourceLink(BaseModel):
    """A link relation, unique by ``rel`` within its resource."""

    model_config = RECORD_CONFIG

    href: Annotated[str, StringConstraints(min_length=1)]
    rel: Annotated[str, StringConstraints(min_length=1)]
    title: Annotated[str, StringConstraints(min_length=1)]
    auth: tuple[str, ...] = ()
    query_shape: ObjectShapeReference | None = None

    @classmethod
    def from_record(cls, record: Any) -> Self:
        """Validate a declarative record into a link.

        Raises:
            ValidationError: If ``href``, ``rel`` or ``title`` is missing or
                any field is malformed.
        """
        return validate_record(cls, record, entity="link")

    def to_record(self) -> dict[str, Any]:
        return dump_record(self)
