from .memory import CategoryInMemoryRepository

__all__ = [
    "CategoryInMemoryRepository",
]
