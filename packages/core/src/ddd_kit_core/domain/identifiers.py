"""Identifier value objects."""

from __future__ import annotations

import re
import uuid
from typing import Any

from pydantic import Field, field_validator, model_validator

from ..primitives.exceptions import InvalidUuidError
from .value_object import ValueObject

# Canonical 8-4-4-4-12 form, versions 1-8 with RFC 4122 variant, plus nil and max.
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff",
    re.IGNORECASE,
)


def generate_uuid() -> str:
    """Returns a string representation of a random UUIDv4."""
    return str(uuid.uuid4())


class Uuid(ValueObject):
    """Validated UUID identifier.

    Usage::

        Uuid()                                        # random UUIDv4
        Uuid("0d6a8a0e-6a5c-4d8e-9f4b-3f1b2c9d7e10")  # validated

    The format check runs on every construction path, generated values
    included, and raises :class:`InvalidUuidError` on failure.
    """

    id: str = Field(default_factory=generate_uuid)

    def __init__(self, id: str | None = None, **data: Any) -> None:  # noqa: A002
        if id is not None:
            data["id"] = id
        super().__init__(**data)

    @field_validator("id", mode="before")
    @classmethod
    def check_type(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise InvalidUuidError()
        return value

    @model_validator(mode="after")
    def check_format(self) -> Uuid:
        self.validate_format()
        return self

    def validate_format(self) -> None:
        """Raise :class:`InvalidUuidError` unless ``id`` is a canonical UUID."""
        if not UUID_PATTERN.fullmatch(self.id):
            raise InvalidUuidError()

    def __str__(self) -> str:
        return self.id
