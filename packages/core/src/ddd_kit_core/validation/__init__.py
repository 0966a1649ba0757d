"""Validation system: ValidationResult, IValidator, PydanticValidator."""

from __future__ import annotations

from .protocol import IValidator
from .pydantic import PydanticValidator
from .result import ValidationResult

__all__ = [
    "IValidator",
    "PydanticValidator",
    "ValidationResult",
]
