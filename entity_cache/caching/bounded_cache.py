"""
Bounded LRU cache in front of a durable store.

Uses OrderedDict as the recency index: move_to_end() marks an entry
most-recently-used and popitem(last=False) removes the least-recently-used
one, both in O(1). Overflow is resolved by writing the evicted entry back
to the persistence port.
"""

import logging
import threading
from collections import OrderedDict
from typing import List, Optional, OrderedDict as OrderedDictType

from ..exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    RecordNotFoundError,
)
from ..interfaces.persistence import IPersistencePort
from ..models.entity import EntityModel

logger = logging.getLogger(__name__)


class BoundedCache:
    """
    Thread-safe LRU cache with write-behind eviction.

    Features:
    - Read-through: a miss is served from the store and re-cached
    - Write-behind on overflow: the LRU entry is saved to the store
    - Delete-through: removal applies to both tiers
    - A single lock serializes every access to the entry map
    """

    def __init__(self, store: IPersistencePort, capacity: int = 3):
        """
        Initialize bounded cache.

        Args:
            store: Durable store used for eviction, read-through and deletes
            capacity: Maximum number of in-memory entries (must be > 0)

        Raises:
            InvalidArgumentError: If capacity is not positive
        """
        if capacity <= 0:
            raise InvalidArgumentError("capacity must be > 0", field="capacity")

        self._store = store
        self._capacity = capacity
        self._entries: OrderedDictType[str, EntityModel] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def put(self, entity: EntityModel) -> None:
        """
        Add or replace an entity and mark it most-recently-used.

        If the cache overflows, the least-recently-used entry is removed and
        saved to the store before the call returns. A failing save propagates
        and the evicted entry stays out of the cache.

        Args:
            entity: Entity to cache

        Raises:
            InvalidArgumentError: If the entity or its id is missing/blank
            StoreUnavailableError: If the eviction write fails
        """
        if entity is None:
            raise InvalidArgumentError("entity must not be null", field="entity")
        self._validate_id(getattr(entity, "id", None))

        # Lock is held across the eviction save so concurrent puts never
        # evict based on a stale size.
        with self._lock:
            self._entries[entity.id] = entity.model_copy()
            self._entries.move_to_end(entity.id)
            logger.info(f"Added to cache: {entity}")

            if len(self._entries) > self._capacity:
                _, eldest = self._entries.popitem(last=False)
                self._store.save(eldest)
                logger.info(f"Evicted LRU -> store: {eldest}")

    def get(self, entity_id: str) -> EntityModel:
        """
        Get an entity, reading through to the store on a miss.

        Args:
            entity_id: Entity identifier

        Returns:
            A copy of the cached or loaded entity

        Raises:
            InvalidArgumentError: If the id is blank
            EntityNotFoundError: If neither tier holds the id
        """
        self._validate_id(entity_id)

        with self._lock:
            hit = self._entries.get(entity_id)
            if hit is not None:
                self._entries.move_to_end(entity_id)
                logger.info(f"Cache HIT id={entity_id}")
                return hit.model_copy()

        logger.info(f"Cache MISS id={entity_id}, checking store")
        loaded = self._store.find_by_id(entity_id)
        if loaded is None:
            raise EntityNotFoundError(entity_id)

        self.put(loaded)
        return loaded.model_copy()

    def remove(self, entity_id: str) -> None:
        """
        Remove an entity from the cache and the store.

        A missing store row is not an error once the id has been found in
        either tier.

        Args:
            entity_id: Entity identifier

        Raises:
            InvalidArgumentError: If the id is blank
            EntityNotFoundError: If neither tier holds the id
        """
        self._validate_id(entity_id)

        with self._lock:
            removed_from_cache = self._entries.pop(entity_id, None) is not None

        if removed_from_cache:
            logger.info(f"Removed from cache: {entity_id}")
            try:
                self._store.delete(entity_id)
                logger.info(f"Removed from store: {entity_id}")
            except RecordNotFoundError:
                logger.warning(f"Entity {entity_id} not found in store during delete (no-op)")
            return

        logger.info(f"Entity {entity_id} not found in cache; checking store...")
        if self._store.find_by_id(entity_id) is None:
            raise EntityNotFoundError(entity_id)

        try:
            self._store.delete(entity_id)
            logger.info(f"Entity {entity_id} was not in cache but was deleted from store")
        except RecordNotFoundError:
            # Deleted concurrently between the lookup and the delete
            logger.warning(f"Entity {entity_id} vanished from store during delete (no-op)")

    def remove_all(self) -> None:
        """Clear the cache, then delete every entity in the store."""
        with self._lock:
            self._entries.clear()
            logger.info("Cleared entire cache")

        self._store.delete_all()
        logger.info("Cleared entire store")

    def clear(self) -> None:
        """Clear the cache only; the store is untouched."""
        with self._lock:
            self._entries.clear()
            logger.info("Cleared cache only")

    def size(self) -> int:
        """Get current number of cached entries."""
        with self._lock:
            return len(self._entries)

    def contains(self, entity_id: str) -> bool:
        """Check whether an id is cached, without touching recency."""
        with self._lock:
            return entity_id in self._entries

    def keys(self) -> List[str]:
        """Snapshot of cached ids, least-recently-used first."""
        with self._lock:
            return list(self._entries.keys())

    @staticmethod
    def _validate_id(entity_id: Optional[str]) -> None:
        if not isinstance(entity_id, str) or not entity_id.strip():
            raise InvalidArgumentError("id must not be null/blank", field="id")
