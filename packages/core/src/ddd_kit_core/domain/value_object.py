"""Immutable Value Object base class."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


def _freeze(value: Any) -> Any:
    """Turn dumped dicts, lists and sets into hashable equivalents."""
    if isinstance(value, dict):
        return tuple(sorted((key, _freeze(item)) for key, item in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return value


class ValueObject(BaseModel):
    """Base class for Value Objects.

    Value objects are immutable and defined by their attributes.
    Equality is structural (all fields compared) and requires the same
    concrete class on both sides, so it stays symmetric across subclasses.
    Comparing against ``None`` or any other type returns ``False``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.model_dump() == other.model_dump()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), _freeze(self.model_dump())))
