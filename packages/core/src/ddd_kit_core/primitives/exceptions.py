"""Domain exceptions for ddd-kit-core."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class DDDKitError(Exception):
    """Root exception for the entire ddd-kit toolkit."""


class DomainError(DDDKitError):
    """Base class for all domain-related errors."""


class NotFoundError(DomainError):
    """Raised when no entity with the given identity exists in a store.

    ``entity_id`` may be a single identity or an ordered sequence of them;
    the message joins them with ``", "``.
    """

    def __init__(self, entity_id: Any, entity_type: type[Any] | str) -> None:
        self.entity_id = entity_id
        self.entity_type = entity_type
        kind = entity_type if isinstance(entity_type, str) else entity_type.__name__
        if isinstance(entity_id, Sequence) and not isinstance(entity_id, str):
            ids = ", ".join(str(i) for i in entity_id)
        else:
            ids = str(entity_id)
        super().__init__(f"Entity {kind} not found using ID {ids}")


class InvalidIdentifierError(DomainError):
    """Raised when a raw identity value fails format validation."""


class InvalidUuidError(InvalidIdentifierError):
    """Raised when a ``Uuid`` value object receives a malformed UUID string."""

    def __init__(self, message: str = "ID must be a valid UUID") -> None:
        super().__init__(message)


class ValidationError(DDDKitError):
    """Raised when field validation fails.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class EntityValidationError(ValidationError):
    """Raised by an entity whose fields violate its validation rule set."""
