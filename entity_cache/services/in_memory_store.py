"""Dictionary-backed persistence port, used in tests and with store_backend=memory"""
import threading
from typing import Dict, Optional

from ..exceptions import RecordNotFoundError
from ..interfaces.persistence import IPersistencePort
from ..models.entity import EntityModel


class InMemoryStore(IPersistencePort):
    """
    Thread-safe in-memory store.

    Rows live only as long as the process, so store_backend=memory suits
    local runs and tests rather than deployments.
    """

    def __init__(self):
        self._rows: Dict[str, EntityModel] = {}
        self._lock = threading.Lock()

    def save(self, entity: EntityModel) -> None:
        with self._lock:
            self._rows[entity.id] = entity

    def delete(self, entity_id: str) -> None:
        with self._lock:
            if self._rows.pop(entity_id, None) is None:
                raise RecordNotFoundError(entity_id)

    def delete_all(self) -> None:
        with self._lock:
            self._rows.clear()

    def find_by_id(self, entity_id: str) -> Optional[EntityModel]:
        with self._lock:
            return self._rows.get(entity_id)

    def entity_count(self) -> int:
        with self._lock:
            return len(self._rows)
