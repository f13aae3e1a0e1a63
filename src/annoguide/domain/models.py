"""Constrained entity models for the jsonplaceholder API.

Every entity derives from :class:`ConstrainedModel`.  Subclasses declare
their regex table in ``allowed_regex``; the table is registered once when
the class is created and checked by an ``after`` model validator, which
pydantic runs for ``Model(...)``, ``model_validate`` and
``model_validate_json`` alike.

``model_construct`` skips validators entirely.  Anything built that way
must go through :meth:`ConstrainedModel.new` before it is handed out.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from annoguide.domain.constraints import (
    REGEX_DATE,
    REGEX_EMAIL,
    REGEX_PHONE_NUMBER,
    REGEX_ZIP_CODE_PLUS_FOUR,
    register_constraints,
    validate_allowed_regex_fields,
)


class ConstrainedModel(BaseModel):
    """Frozen base model whose regex table is enforced after construction."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    allowed_regex: ClassVar[dict[str, str]] = {}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        register_constraints(cls, cls.model_fields, cls.allowed_regex)

    @model_validator(mode="after")
    def check_allowed_regex(self) -> Self:
        validate_allowed_regex_fields(self)
        return self

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy through :meth:`new`; pydantic's own copy never validates *update*."""
        return super().model_copy(update=update, deep=deep).new()

    def new(self) -> Self:
        """Rebuild this instance through the constructor so validation runs.

        Nested constrained entities are rebuilt first; an already-built
        child passed to a parent constructor is not re-validated.
        """
        values: dict[str, Any] = {}
        for name in type(self).model_fields:
            if name not in self.__dict__:
                continue
            value = self.__dict__[name]
            if isinstance(value, ConstrainedModel):
                value = value.new()
            values[name] = value
        return type(self)(**values)


class Address(ConstrainedModel):
    street: str
    suite: str | None = None
    city: str
    zipcode: str

    allowed_regex: ClassVar[dict[str, str]] = {"zipcode": REGEX_ZIP_CODE_PLUS_FOUR}


class User(ConstrainedModel):
    """A user record as returned by ``GET /users/{id}``."""

    name: str
    username: str
    email: str
    birth_date: str | None = Field(default=None, alias="birthDate")
    address: Address
    phone: str

    allowed_regex: ClassVar[dict[str, str]] = {
        "email": REGEX_EMAIL,
        "birth_date": REGEX_DATE,
        "phone": REGEX_PHONE_NUMBER,
    }


class Post(ConstrainedModel):
    """A post record as returned by ``GET /posts/{id}``. No constrained fields."""

    user_id: int = Field(alias="userId")
    id: int
    title: str
    body: str


ENTITY_TYPES: dict[str, type[ConstrainedModel]] = {
    "user": User,
    "address": Address,
    "post": Post,
}


def get_entity_type(kind: str) -> type[ConstrainedModel]:
    """Look up an entity class by its lowercase kind name.

    Raises:
        KeyError: If *kind* is not registered.
    """
    try:
        return ENTITY_TYPES[kind]
    except KeyError:
        msg = f"Unknown entity kind {kind!r}; expected one of {sorted(ENTITY_TYPES)}"
        raise KeyError(msg) from None
