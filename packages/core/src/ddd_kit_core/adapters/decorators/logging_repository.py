"""LoggingRepository - Decorator for IRepository that logs every operation."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from ddd_kit_core.ports.repository import ID, E, IRepository

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

R = TypeVar("R")

logger = logging.getLogger("ddd_kit.logging")


class LoggingRepository(IRepository[E, ID]):
    """
    Decorator that logs each call on any IRepository.

    Pattern:
    - every operation: log start -> delegate to inner -> log duration
    - failure: log with traceback -> re-raise unchanged

    The entity kind in the records comes from ``inner.get_entity()``.
    """

    def __init__(
        self,
        inner: IRepository[E, ID],
        *,
        log: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self._inner: IRepository[E, ID] = inner
        self._logger = log or logger
        self._level = level

    async def insert(self, entity: E) -> None:
        await self._run("insert", lambda: self._inner.insert(entity))

    async def bulk_insert(self, entities: Iterable[E]) -> None:
        batch = list(entities)
        await self._run("bulk_insert", lambda: self._inner.bulk_insert(batch))

    async def update(self, entity: E) -> None:
        await self._run("update", lambda: self._inner.update(entity))

    async def delete(self, entity_id: ID) -> None:
        await self._run("delete", lambda: self._inner.delete(entity_id))

    async def find_by_id(self, entity_id: ID) -> E | None:
        return await self._run("find_by_id", lambda: self._inner.find_by_id(entity_id))

    async def find_all(self) -> list[E]:
        return await self._run("find_all", self._inner.find_all)

    def get_entity(self) -> type[E]:
        return self._inner.get_entity()

    async def _run(self, operation: str, call: Callable[[], Awaitable[R]]) -> R:
        kind = self.get_entity().__name__
        self._logger.log(self._level, "%s.%s started", kind, operation)
        start = time.perf_counter()
        try:
            result = await call()
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            self._logger.exception("%s.%s failed after %.2fms", kind, operation, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        self._logger.log(
            self._level, "%s.%s completed in %.2fms", kind, operation, elapsed
        )
        return result
