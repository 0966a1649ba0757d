"""ValidationResult — structured validation errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def default_errors_factory() -> dict[str, list[str]]:
    """Factory for mutable default dict in ValidationResult dataclass fields."""
    return {}


@dataclass
class ValidationResult:
    """Collects field-level validation errors.

    Keys are dotted field locations (``"name"``, ``"address.zip"``).

    Usage::

        result = ValidationResult.success()
        result.add_error("name", "is required")
    """

    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    def add_error(self, field_name: str, message: str) -> None:
        """Add a single error for *field_name*."""
        self.errors.setdefault(field_name, []).append(message)

    def restricted_to(self, field_names: Iterable[str]) -> ValidationResult:
        """Keep only errors whose top-level field is in *field_names*."""
        wanted = set(field_names)
        return ValidationResult(
            errors={
                loc: list(messages)
                for loc, messages in self.errors.items()
                if loc.split(".", 1)[0] in wanted
            }
        )

    def __bool__(self) -> bool:
        return self.is_valid
