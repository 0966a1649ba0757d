from .logging_repository import LoggingRepository

__all__ = [
    "LoggingRepository",
]
