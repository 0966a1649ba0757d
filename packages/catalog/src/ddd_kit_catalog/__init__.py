"""ddd-kit-catalog — Category bounded context built on ddd-kit-core."""

from __future__ import annotations

from .adapters import CategoryInMemoryRepository
from .domain import Category, CategoryRepository, CategoryRules

__all__: list[str] = [
    "Category",
    "CategoryInMemoryRepository",
    "CategoryRepository",
    "CategoryRules",
]
