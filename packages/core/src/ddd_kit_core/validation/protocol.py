"""IValidator — field-validation protocol owned by an entity kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for entity field validators.

    Implementations are pure: invalid data yields a failed
    :class:`~ddd_kit_core.validation.result.ValidationResult`, it never
    raises.
    """

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        """Validate the field mapping *data*."""
        ...
