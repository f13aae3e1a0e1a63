"""JSON <-> entity conversion.

Two decode strategies exist so the construct-bypass can be demonstrated:

- ``validate``: ``model_validate_json``; the entity validator fires while
  decoding.
- ``construct``: ``model_construct`` (no validation at all), followed by an
  explicit :meth:`~annoguide.domain.models.ConstrainedModel.new` rebuild.

INVARIANT: both strategies return validated entities and raise the same
ConstraintViolation for the same payload.
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import ValidationError

from annoguide.domain.errors import DecodeError
from annoguide.domain.models import ConstrainedModel


T = TypeVar("T", bound=ConstrainedModel)


class DecodeStrategy(StrEnum):
    """How raw JSON is turned into an entity instance."""

    VALIDATE = "validate"
    CONSTRUCT = "construct"


def decode_entity(
    entity_type: type[T],
    raw: bytes | str,
    *,
    strategy: DecodeStrategy = DecodeStrategy.VALIDATE,
) -> T:
    """Decode *raw* JSON into a validated *entity_type* instance.

    Raises:
        ConstraintViolation: A constrained field does not match its regex.
        DecodeError: *raw* is not JSON, or does not fit *entity_type*.
    """
    name = entity_type.__name__
    if strategy is DecodeStrategy.VALIDATE:
        try:
            return entity_type.model_validate_json(raw)
        except ValidationError as exc:
            raise DecodeError(name, _summarize(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DecodeError(name, f"invalid JSON: {exc.msg}") from exc
    except UnicodeDecodeError as exc:
        raise DecodeError(name, f"invalid JSON: {exc.reason}") from exc
    if not isinstance(data, dict):
        raise DecodeError(name, f"expected a JSON object, got {type(data).__name__}")

    unchecked = entity_type.model_construct(**data)
    try:
        return unchecked.new()
    except ValidationError as exc:
        raise DecodeError(name, _summarize(exc)) from exc


def encode_entity(entity: ConstrainedModel) -> dict[str, Any]:
    """Dump *entity* with JSON field names (``birthDate``, ``userId``)."""
    return entity.model_dump(mode="json", by_alias=True)


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
