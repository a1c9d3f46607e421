"""
Persistence interface - abstracts the durable store behind the cache.
"""

from abc import ABC, abstractmethod
from typing import Optional
from ..models.entity import EntityModel


class IPersistencePort(ABC):
    """
    Durable key-value store consumed by the cache.

    Keeps the cache independent of any storage technology, so it can be
    exercised against an in-memory fake as easily as a SQL database.
    """

    @abstractmethod
    def save(self, entity: EntityModel) -> None:
        """
        Insert or replace the stored entity with the same id.

        Args:
            entity: Entity to persist

        Raises:
            StoreUnavailableError: If the store cannot be written
        """
        pass

    @abstractmethod
    def delete(self, entity_id: str) -> None:
        """
        Delete the stored entity by id.

        Args:
            entity_id: Entity identifier

        Raises:
            RecordNotFoundError: If no entity is stored under the id
            StoreUnavailableError: If the store cannot be written
        """
        pass

    @abstractmethod
    def delete_all(self) -> None:
        """Delete every stored entity."""
        pass

    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[EntityModel]:
        """
        Look up an entity by id.

        Args:
            entity_id: Entity identifier

        Returns:
            EntityModel if stored, None otherwise
        """
        pass
