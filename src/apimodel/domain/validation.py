"""Record validation on top of pydantic.

Entities are declared as pydantic models; this module is the single seam
where a raw declarative record becomes a validated model instance and where
pydantic's error report becomes a :class:`ValidationError` with one
message per offending field.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from apimodel.domain.errors import DuplicateKeyError, ValidationError

# Shared by every declarative record: camelCase document keys, snake_case
# attributes, unknown keys rejected, instances immutable.
RECORD_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")
K = TypeVar("K")


def format_errors(exc: pydantic.ValidationError) -> list[str]:
    """Flatten a pydantic error report into ``"<loc>: <msg>"`` strings."""
    messages: list[str] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in err["loc"]) or "<record>"
        messages.append(f"{loc}: {err['msg']}")
    return messages


def validate_record(model_cls: type[M], record: Any, *, entity: str) -> M:
    """Validate *record* against *model_cls*.

    An instance of *model_cls* is returned unchanged. ``None`` and
    non-mapping values are reported as malformed records.

    Raises:
        ValidationError: If the record does not satisfy the model.
    """
    if isinstance(record, model_cls):
        return record
    if not isinstance(record, Mapping):
        got = type(record).__name__
        raise ValidationError(entity, [f"<record>: expected a mapping, got {got}"])
    try:
        return model_cls.model_validate(dict(record))
    except pydantic.ValidationError as exc:
        raise ValidationError(entity, format_errors(exc)) from exc


def dump_record(model: BaseModel) -> dict[str, Any]:
    """Render a model in document form (camelCase keys, unset optionals omitted)."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def index_unique(items: Iterable[T], key: Callable[[T], K], *, what: str) -> dict[K, T]:
    """Index *items* by *key*, rejecting duplicate keys.

    INVARIANT: either every item is indexed or nothing is returned.

    Raises:
        DuplicateKeyError: Listing every key that occurs more than once.
    """
    materialized = list(items)
    counts = Counter(key(item) for item in materialized)
    duplicates = [str(k) for k, n in counts.items() if n > 1]
    if duplicates:
        raise DuplicateKeyError(what, duplicates)
    return {key(item): item for item in materialized}
