"""IRepository — generic repository protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from ..domain.entity import Entity
from ..domain.value_object import ValueObject

if TYPE_CHECKING:
    from collections.abc import Iterable

E = TypeVar("E", bound=Entity)
ID = TypeVar("ID", bound=ValueObject)


@runtime_checkable
class IRepository(Protocol[E, ID]):
    """
    Generic Repository interface for identity-keyed entity stores.

    Entities are located by value equality of their ``entity_id``. Every
    data operation is a coroutine so that I/O-backed stores can implement
    the same contract::

        await repo.insert(product)
        found = await repo.find_by_id(product.entity_id)

    ``update`` and ``delete`` raise
    :class:`~ddd_kit_core.primitives.exceptions.NotFoundError` when the
    identity is absent; ``find_by_id`` returns ``None`` instead. Inserting
    a duplicate identity is not detected, callers keep identities unique.
    """

    async def insert(self, entity: E) -> None: ...

    async def bulk_insert(self, entities: Iterable[E]) -> None: ...

    async def update(self, entity: E) -> None: ...

    async def delete(self, entity_id: ID) -> None: ...

    async def find_by_id(self, entity_id: ID) -> E | None: ...

    async def find_all(self) -> list[E]: ...

    def get_entity(self) -> type[E]:
        """Return the concrete entity class this repository stores."""
        ...

