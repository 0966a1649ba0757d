"""Adapters: in-memory store and repository decorators."""

from .decorators import LoggingRepository
from .memory import InMemoryRepository

__all__ = [
    "InMemoryRepository",
    "LoggingRepository",
]
