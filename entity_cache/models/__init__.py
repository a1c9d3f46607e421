from .entity import EntityModel, ApiResponse
from .entity_orm import EntityORM, Base
from .converters import orm_to_pydantic, pydantic_to_orm

__all__ = [
    "EntityModel",
    "ApiResponse",
    "EntityORM",
    "Base",
    "orm_to_pydantic",
    "pydantic_to_orm",
]
