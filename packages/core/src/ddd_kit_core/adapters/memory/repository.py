"""InMemoryRepository — list-backed reference store."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from ddd_kit_core.ports.repository import ID, E, IRepository
from ddd_kit_core.primitives.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable


class InMemoryRepository(IRepository[E, ID]):
    """In-memory implementation of ``IRepository[E, ID]``.

    Stores entities in a plain list in insertion order. Lookups are a
    linear scan comparing ``entity_id`` values, ``update`` replaces in
    place and ``delete`` closes the gap, so survivors keep their order.

    ``find_all`` returns a new list holding the stored entity instances:
    reordering the result is harmless, mutating an entity in it is not.
    ``items`` is public for test assertions.

    Concrete repositories bind the entity kind::

        class ProductInMemoryRepository(InMemoryRepository[Product, Uuid]):
            def get_entity(self) -> type[Product]:
                return Product
    """

    def __init__(self) -> None:
        self.items: list[E] = []

    async def insert(self, entity: E) -> None:
        self.items.append(entity)

    async def bulk_insert(self, entities: Iterable[E]) -> None:
        self.items.extend(entities)

    async def update(self, entity: E) -> None:
        index = self._index_of(entity.entity_id)  # type: ignore[arg-type]
        if index is None:
            raise self._not_found(entity.entity_id)
        self.items[index] = entity

    async def delete(self, entity_id: ID) -> None:
        index = self._index_of(entity_id)
        if index is None:
            raise self._not_found(entity_id)
        del self.items[index]

    async def find_by_id(self, entity_id: ID) -> E | None:
        index = self._index_of(entity_id)
        return None if index is None else self.items[index]

    async def find_all(self) -> list[E]:
        return list(self.items)

    @abstractmethod
    def get_entity(self) -> type[E]:
        """Return the concrete entity class this repository stores."""

    # ── Internals ────────────────────────────────────────────────

    @property
    def _kind(self) -> str:
        return self.get_entity().__name__

    def _index_of(self, entity_id: ID) -> int | None:
        for index, item in enumerate(self.items):
            if item.entity_id == entity_id:
                return index
        return None

    def _not_found(self, entity_id: object) -> NotFoundError:
        return NotFoundError(entity_id, self.get_entity())

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)
