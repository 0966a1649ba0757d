"""Domain primitives: entities, value objects, identifiers."""

from __future__ import annotations

from .entity import Entity
from .identifiers import Uuid
from .value_object import ValueObject

__all__: list[str] = [
    "Entity",
    "Uuid",
    "ValueObject",
]
