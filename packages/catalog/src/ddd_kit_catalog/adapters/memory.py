"""In-memory Category store."""

from __future__ import annotations

from ddd_kit_core.adapters.memory.repository import InMemoryRepository
from ddd_kit_core.domain.identifiers import Uuid

from ..domain.category import Category


class CategoryInMemoryRepository(InMemoryRepository[Category, Uuid]):
    def get_entity(self) -> type[Category]:
        return Category
