"""Catalog domain: the Category entity and its repository contract."""

from __future__ import annotations

from .category import Category, CategoryRules
from .repository import CategoryRepository

__all__: list[str] = [
    "Category",
    "CategoryRepository",
    "CategoryRules",
]
