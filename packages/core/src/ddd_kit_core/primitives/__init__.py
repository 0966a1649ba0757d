"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    DDDKitError,
    DomainError,
    EntityValidationError,
    InvalidIdentifierError,
    InvalidUuidError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "DDDKitError",
    "DomainError",
    "EntityValidationError",
    "InvalidIdentifierError",
    "InvalidUuidError",
    "NotFoundError",
    "ValidationError",
]
