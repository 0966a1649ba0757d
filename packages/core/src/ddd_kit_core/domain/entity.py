"""Entity base class: identity-based equality and validated mutation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..primitives.exceptions import EntityValidationError
from ..validation.protocol import IValidator

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .value_object import ValueObject


class Entity(BaseModel, ABC):
    """Base class for all identity-bearing domain entities.

    Subclasses expose exactly one identity value object through the
    read-only ``entity_id`` property. Two entities are equal when they are
    of the same concrete class and their identities are equal; every other
    field is ignored.

    A subclass may declare its validation rule set as ``validator``.
    ``validate_fields`` checks raw data against it and mutators go through
    ``_change`` so a rejected change leaves the entity untouched::

        class Product(Entity):
            validator: ClassVar[IValidator | None] = PydanticValidator(ProductRules)

            product_id: Uuid = Field(default_factory=Uuid)
            name: str

            @property
            def entity_id(self) -> Uuid:
                return self.product_id

            def rename(self, name: str) -> None:
                self._change(name=name)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    validator: ClassVar[IValidator | None] = None

    @property
    @abstractmethod
    def entity_id(self) -> ValueObject:
        """The identity value object of this entity."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.entity_id == other.entity_id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.entity_id))

    @classmethod
    def validate_fields(
        cls, data: Mapping[str, Any], only: Iterable[str] | None = None
    ) -> None:
        """Raise :class:`EntityValidationError` if *data* breaks the rule set.

        With *only*, errors on other fields are ignored.
        """
        if cls.validator is None:
            return
        result = cls.validator.validate(data)
        if only is not None:
            result = result.restricted_to(only)
        if not result.is_valid:
            raise EntityValidationError(result.errors)

    def _change(self, **changes: Any) -> None:
        """Validate the changed fields on a draft of the field data, then commit.

        Only errors on the changed fields reject the change, so an entity
        rebuilt from data that breaks another rule can still be mutated.
        """
        draft = {**self.model_dump(), **changes}
        self.validate_fields(draft, only=changes)
        for name, value in changes.items():
            setattr(self, name, value)
