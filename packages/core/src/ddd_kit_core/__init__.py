"""ddd-kit-core — Foundation package for the ddd-kit toolkit.

Entities, value objects and the repository contract with its in-memory
reference store. Pydantic is the only runtime dependency.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters import InMemoryRepository, LoggingRepository

# ── Domain ───────────────────────────────────────────────────────
from .domain import Entity, Uuid, ValueObject

# ── Ports ────────────────────────────────────────────────────────
from .ports import IRepository

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    DDDKitError,
    DomainError,
    EntityValidationError,
    InvalidIdentifierError,
    InvalidUuidError,
    NotFoundError,
    ValidationError,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import IValidator, PydanticValidator, ValidationResult

__all__: list[str] = [
    # Domain
    "Entity",
    "Uuid",
    "ValueObject",
    # Ports
    "IRepository",
    # Adapters
    "InMemoryRepository",
    "LoggingRepository",
    # Validation
    "IValidator",
    "PydanticValidator",
    "ValidationResult",
    # Primitives
    "DDDKitError",
    "DomainError",
    "EntityValidationError",
    "InvalidIdentifierError",
    "InvalidUuidError",
    "NotFoundError",
    "ValidationError",
]
