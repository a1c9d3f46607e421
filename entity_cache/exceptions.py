"""Custom exceptions for the entity cache."""

from typing import Optional


class EntityCacheError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class InvalidArgumentError(EntityCacheError, ValueError):
    """Blank or missing id, or an invalid construction parameter.

    Attributes:
        field: The argument that failed validation (if applicable)
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="INVALID_ARGUMENT")
        self.field = field


class EntityNotFoundError(EntityCacheError):
    """Entity is absent from both the cache and the durable store."""

    def __init__(self, entity_id: str):
        super().__init__(
            f"Entity with id={entity_id} not found in cache or store",
            error_code="NOT_FOUND"
        )
        self.entity_id = entity_id


class StoreUnavailableError(EntityCacheError):
    """The durable store could not complete an operation.

    Attributes:
        operation: Store operation that failed (save, delete, ...)
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, error_code="STORE_UNAVAILABLE")
        self.operation = operation


class RecordNotFoundError(EntityCacheError):
    """Raised by a store's delete when no row exists for the id."""

    def __init__(self, entity_id: str):
        super().__init__(
            f"No stored record with id={entity_id}",
            error_code="RECORD_NOT_FOUND"
        )
        self.entity_id = entity_id
