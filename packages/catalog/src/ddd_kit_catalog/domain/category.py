"""Category entity and its validation rule set."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator

from ddd_kit_core.domain.entity import Entity
from ddd_kit_core.domain.identifiers import Uuid
from ddd_kit_core.validation.protocol import IValidator
from ddd_kit_core.validation.pydantic import PydanticValidator

NAME_MAX_LENGTH = 255


class CategoryRules(BaseModel):
    """Field rules every Category must satisfy."""

    name: Annotated[StrictStr, Field(min_length=1, max_length=NAME_MAX_LENGTH)]
    description: StrictStr | None = None
    is_active: StrictBool = True


class Category(Entity):
    """A catalog category, identified by ``category_id``.

    Use :meth:`create` for new categories: it validates the command data
    before anything is built. The plain constructor rebuilds a category
    from trusted data, e.g. when loading from a store.
    """

    validator: ClassVar[IValidator | None] = PydanticValidator(CategoryRules)

    category_id: Uuid = Field(default_factory=Uuid)
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("category_id", mode="before")
    @classmethod
    def generate_missing_id(cls, value: Any) -> Any:
        return Uuid() if value is None else value

    @property
    def entity_id(self) -> Uuid:
        return self.category_id

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None = None,
        is_active: bool = True,
    ) -> Category:
        data = {"name": name, "description": description, "is_active": is_active}
        cls.validate_fields(data)
        return cls(**data)

    def change_name(self, name: str) -> None:
        self._change(name=name)

    def change_description(self, description: str | None) -> None:
        self._change(description=description)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False
