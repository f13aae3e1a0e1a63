"""Domain exceptions.

ConstraintViolation must not inherit from ValueError: pydantic wraps
ValueError raised inside validators into ValidationError, so only a
non-ValueError escapes unchanged from both ``Model(...)`` and
``model_validate_json``.
"""

from __future__ import annotations

from typing import Any


class AnnoguideError(Exception):
    """Base class for all annoguide errors."""


class ConstraintViolation(AnnoguideError):
    """A non-null field value does not fully match its declared regex."""

    def __init__(self, field: str, value: str, pattern: str) -> None:
        self.field = field
        self.value = value
        self.pattern = pattern
        super().__init__(f"Regex does not match: {field} = {value}, regex = {pattern}")

    def to_detail(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value, "pattern": self.pattern}


class DecodeError(AnnoguideError):
    """Raw data could not be turned into an entity (bad JSON or bad shape)."""

    def __init__(self, entity: str, reason: str) -> None:
        self.entity = entity
        self.reason = reason
        super().__init__(f"Cannot decode {entity}: {reason}")
