"""CategoryRepository — repository contract for categories."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ddd_kit_core.domain.identifiers import Uuid
from ddd_kit_core.ports.repository import IRepository

from .category import Category


@runtime_checkable
class CategoryRepository(IRepository[Category, Uuid], Protocol):
    """Stores :class:`Category` entities keyed by their ``Uuid``."""
