"""Regex field constraints and the enforcer that checks them.

Each entity type declares an explicit ``field -> pattern`` table.  The
table is registered once, when the class is defined, and the enforcer
walks the registered list instead of introspecting instances.

INVARIANT: matching is full-string (``re.fullmatch``). ``None`` is exempt.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from annoguide.domain.errors import ConstraintViolation

REGEX_DATE = r"\d{4}-\d{2}-\d{2}"
REGEX_ZIP_CODE_PLUS_FOUR = r"\d{5}-\d{4}"
# Loose on purpose: admits repeated dots and has no length bounds.
REGEX_EMAIL = r"[a-zA-Z0-9._-]+@[a-z]+\.+[a-z]+"
# ".*" allows an optional extension, e.g. "111-222-3333 x09125"
REGEX_PHONE_NUMBER = r"\d{3}-\d{3}-\d{4}.*"


@dataclass(frozen=True)
class FieldConstraint:
    """One registered ``(field, pattern)`` pair."""

    field: str
    pattern: str
    compiled: re.Pattern[str]

    def matches(self, value: str) -> bool:
        return self.compiled.fullmatch(value) is not None


# Populated by register_constraints() at class definition time.
CONSTRAINT_REGISTRY: dict[type, tuple[FieldConstraint, ...]] = {}


def register_constraints(
    entity_type: type,
    field_names: Iterable[str],
    table: Mapping[str, str],
) -> tuple[FieldConstraint, ...]:
    """Register *table* for *entity_type* and return the ordered constraints.

    Constraints follow the order of *field_names* (the type's declaration
    order), not the order of *table*.

    Raises:
        TypeError: If *table* names a field the type does not declare.
    """
    names = list(field_names)
    unknown = sorted(set(table) - set(names))
    if unknown:
        msg = f"{entity_type.__name__} declares constraints for unknown fields: {unknown}"
        raise TypeError(msg)

    constraints = tuple(
        FieldConstraint(field=name, pattern=table[name], compiled=re.compile(table[name]))
        for name in names
        if name in table
    )
    CONSTRAINT_REGISTRY[entity_type] = constraints
    return constraints


def constraints_for(entity_type: type) -> tuple[FieldConstraint, ...]:
    """Return the registered constraints for *entity_type* (empty if none)."""
    return CONSTRAINT_REGISTRY.get(entity_type, ())


def enforce_allowed_regex(instance: Any, constraints: Iterable[FieldConstraint]) -> None:
    """Check *instance* against *constraints*, failing on the first mismatch.

    Only non-null string values are checked.  Reads attributes, never
    writes them.

    Raises:
        ConstraintViolation: For the first field whose value does not fully
            match its pattern.
    """
    for constraint in constraints:
        value = getattr(instance, constraint.field, None)
        if not isinstance(value, str):
            continue
        if not constraint.matches(value):
            raise ConstraintViolation(constraint.field, value, constraint.pattern)


def validate_allowed_regex_fields(instance: Any) -> None:
    """Run the enforcer with the constraints registered for ``type(instance)``."""
    enforce_allowed_regex(instance, constraints_for(type(instance)))
