"""Shared fixtures for entity cache tests."""

import pytest

from entity_cache.caching.bounded_cache import BoundedCache
from entity_cache.exceptions import StoreUnavailableError
from entity_cache.models.entity import EntityModel
from entity_cache.services.in_memory_store import InMemoryStore


class CountingStore(InMemoryStore):
    """In-memory store that logs saves and lookups."""

    def __init__(self):
        super().__init__()
        self.saved = []
        self.find_calls = []

    def save(self, entity):
        super().save(entity)
        self.saved.append(entity)

    def find_by_id(self, entity_id):
        self.find_calls.append(entity_id)
        return super().find_by_id(entity_id)


class FailingStore(InMemoryStore):
    """In-memory store whose writes always fail."""

    def save(self, entity):
        raise StoreUnavailableError("connection refused", operation="save")

    def delete_all(self):
        raise StoreUnavailableError("connection refused", operation="delete_all")


class DownStore(InMemoryStore):
    """In-memory store whose deletes and lookups always fail."""

    def delete(self, entity_id):
        raise StoreUnavailableError("connection refused", operation="delete")

    def find_by_id(self, entity_id):
        raise StoreUnavailableError("connection refused", operation="find_by_id")


@pytest.fixture
def store():
    """Create an empty counting in-memory store."""
    return CountingStore()


@pytest.fixture
def failing_store():
    """Create a store that rejects saves and bulk deletes."""
    return FailingStore()


@pytest.fixture
def down_store():
    """Create a store that rejects deletes and lookups."""
    return DownStore()


@pytest.fixture
def cache(store):
    """Create a cache of capacity 3 over the test store."""
    return BoundedCache(store, capacity=3)


@pytest.fixture
def make_entity():
    """Factory for test entities."""
    def _make(entity_id: str, data: str = None) -> EntityModel:
        return EntityModel(id=entity_id, data=data if data is not None else f"data-{entity_id}")
    return _make
