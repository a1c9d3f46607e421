import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Load environment variables
load_dotenv()

from .config import settings
from .caching.bounded_cache import BoundedCache
from .exceptions import EntityNotFoundError, InvalidArgumentError, StoreUnavailableError
from .interfaces.persistence import IPersistencePort
from .models.entity import ApiResponse
from .routers.api import router
from .services.database_service import DatabaseService
from .services.in_memory_store import InMemoryStore

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_store() -> IPersistencePort:
    """Create the durable store selected by settings.store_backend"""
    if settings.store_backend == "memory":
        logger.info("Using in-memory store")
        return InMemoryStore()

    db = DatabaseService(settings.database_url)
    db.connect()
    db.initialize_schema()
    logger.info(f"Database contains {db.entity_count():,} entities")
    return db


def _error_response(message: str, code: int) -> JSONResponse:
    return JSONResponse(status_code=code, content=ApiResponse.error(message, code).model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Translate cache and store errors into ApiResponse bodies"""

    @app.exception_handler(EntityNotFoundError)
    async def not_found(request: Request, exc: EntityNotFoundError):
        logger.warning(f"Not found: {exc.message}")
        return _error_response(exc.message, 404)

    @app.exception_handler(InvalidArgumentError)
    async def bad_request(request: Request, exc: InvalidArgumentError):
        logger.warning(f"Bad request: {exc.message}")
        return _error_response(f"Invalid input: {exc.message}", 400)

    @app.exception_handler(RequestValidationError)
    async def validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        msg = errors[0].get("msg", "Validation failed") if errors else "Validation failed"
        logger.warning(f"Validation failed: {msg}")
        return _error_response(f"Validation failed: {msg}", 400)

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable(request: Request, exc: StoreUnavailableError):
        logger.error(f"DB error: {exc.message}")
        return _error_response(f"Database unavailable: {exc.message}", 503)

    @app.exception_handler(Exception)
    async def unexpected(request: Request, exc: Exception):
        logger.exception("Unexpected error")
        return _error_response(f"Unexpected error: {exc}", 500)


def create_app(cache: Optional[BoundedCache] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        cache: Pre-built cache to serve; when omitted the lifespan builds
            the store and cache from settings

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        logger.info(f"Starting {settings.app_name}...")
        store = None

        if cache is None:
            store = build_store()
            app.state.cache = BoundedCache(store, settings.cache_max_size)
            app.state.store = store
        else:
            app.state.cache = cache

        logger.info(f"{settings.app_name} ready (capacity={app.state.cache.capacity})")

        yield

        logger.info(f"Shutting down {settings.app_name}...")
        if isinstance(store, DatabaseService):
            store.disconnect()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Bounded LRU cache with write-behind eviction to a durable store",
        lifespan=lifespan
    )
    app.state.cache = None
    app.state.store = None

    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        store = app.state.store
        return {
            "status": "healthy",
            "cache_ready": app.state.cache is not None,
            "store_ready": not isinstance(store, DatabaseService) or store.is_connected()
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "entity_cache.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
