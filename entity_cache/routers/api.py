from fastapi import APIRouter, Depends, Request

from ..caching.bounded_cache import BoundedCache
from ..models.entity import ApiResponse, EntityModel


router = APIRouter(prefix="/cache", tags=["cache"])


# Dependency to get the cache (set up in main.py lifespan)
def get_cache(request: Request) -> BoundedCache:
    return request.app.state.cache


@router.post("/add", response_model=ApiResponse)
def add(
    entity: EntityModel,
    cache: BoundedCache = Depends(get_cache)
) -> ApiResponse:
    """
    Add or update an entity in the cache

    Overflow evicts the least-recently-used entity to the store.
    """
    cache.put(entity)
    return ApiResponse.success("Entity added to cache", entity)


@router.get("/get/{entity_id}", response_model=ApiResponse)
def get(
    entity_id: str,
    cache: BoundedCache = Depends(get_cache)
) -> ApiResponse:
    """
    Get an entity, loading it from the store on a cache miss

    Args:
        entity_id: Entity identifier

    Returns:
        ApiResponse carrying the entity
    """
    entity = cache.get(entity_id)
    return ApiResponse.success("Entity retrieved", entity)


@router.delete("/remove/{entity_id}", response_model=ApiResponse)
def remove(
    entity_id: str,
    cache: BoundedCache = Depends(get_cache)
) -> ApiResponse:
    """Remove an entity from both the cache and the store"""
    cache.remove(entity_id)
    return ApiResponse.success("Entity removed from cache and DB", entity_id)


@router.delete("/removeAll", response_model=ApiResponse)
def remove_all(cache: BoundedCache = Depends(get_cache)) -> ApiResponse:
    """Remove every entity from the cache and the store"""
    cache.remove_all()
    return ApiResponse.success("All entities removed from cache and DB")


@router.delete("/clear", response_model=ApiResponse)
def clear(cache: BoundedCache = Depends(get_cache)) -> ApiResponse:
    """Clear the cache only (store untouched)"""
    cache.clear()
    return ApiResponse.success("Cache cleared (DB untouched)")


@router.get("/size", response_model=ApiResponse)
def size(cache: BoundedCache = Depends(get_cache)) -> ApiResponse:
    """Get current cache size and capacity"""
    return ApiResponse.success(
        "Cache size",
        {"size": cache.size(), "capacity": cache.capacity}
    )
