"""ObjectShapeReference — pointer to an externally defined payload shape.

The model never resolves these references; it only checks that they are
well formed: ``ns://`` namespace, ``MAJOR.MINOR.PATCH`` version, type name.
"""

from __future__ import annotations

from typing import Annotated, Any, Self

from pydantic import BaseModel, StringConstraints

from apimodel.domain.validation import RECORD_CONFIG, dump_record, validate_record

NAMESPACE_PATTERN = r"^ns://.+"
VERSION_PATTERN = r"^\d+\.\d+\.\d+$"


class ObjectShapeReference(BaseModel):
    """Namespace + semantic version + type name of an external shape."""

    model_config = RECORD_CONFIG

    namespace: Annotated[str, StringConstraints(pattern=NAMESPACE_PATTERN)]
    version: Annotated[str, StringConstraints(pattern=VERSION_PATTERN)]
    type: Annotated[str, StringConstraints(min_length=1)]

    @classmethod
    def from_record(cls, record: Any) -> Self:
        return validate_record(cls, record, entity="object shape reference")

    def to_record(self) -> dict[str, Any]:
        return dump_record(self)

    def __str__(self) -> str:
        return f"{self.namespace}#{self.type}@{self.version}"
