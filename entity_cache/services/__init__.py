from .database_service import DatabaseService
from .in_memory_store import InMemoryStore

__all__ = [
    "DatabaseService",
    "InMemoryStore",
]
