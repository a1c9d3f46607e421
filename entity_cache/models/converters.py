"""Utilities to convert between SQLAlchemy ORM and Pydantic models"""
from entity_cache.models.entity import EntityModel
from entity_cache.models.entity_orm import EntityORM


def orm_to_pydantic(entity_orm: EntityORM) -> EntityModel:
    """
    Convert SQLAlchemy ORM EntityORM to Pydantic EntityModel

    Args:
        entity_orm: SQLAlchemy ORM model instance

    Returns:
        Pydantic EntityModel instance
    """
    return EntityModel(**entity_orm.to_dict())


def pydantic_to_orm(entity: EntityModel) -> EntityORM:
    """
    Convert Pydantic EntityModel to SQLAlchemy ORM EntityORM

    Args:
        entity: Pydantic EntityModel instance

    Returns:
        SQLAlchemy ORM EntityORM instance
    """
    return EntityORM(**entity.model_dump())
