"""PydanticValidator — leverages Pydantic model validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel


class PydanticValidator:
    """Validates field data against a Pydantic rules model.

    Only the fields declared on *rules* are read from the data, so an
    entity can hand over its full ``model_dump()``. Every
    ``ValidationError`` entry becomes one message in the
    :class:`~ddd_kit_core.validation.result.ValidationResult`, keyed by
    the dotted error location.
    """

    def __init__(self, rules: type[BaseModel]) -> None:
        self.rules = rules

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        fields = {name: data[name] for name in self.rules.model_fields if name in data}
        result = ValidationResult.success()
        try:
            self.rules.model_validate(fields)
        except PydanticValidationError as exc:
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                result.add_error(loc, error.get("msg", "validation error"))
        return result
