"""SQLAlchemy-based durable store for cached entities"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional
from sqlalchemy import create_engine, delete, func, select
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import RecordNotFoundError, StoreUnavailableError
from ..interfaces.persistence import IPersistencePort
from ..models.entity import EntityModel
from ..models.entity_orm import EntityORM, Base
from ..models.converters import orm_to_pydantic, pydantic_to_orm

logger = logging.getLogger(__name__)


class DatabaseService(IPersistencePort):
    """SQLAlchemy implementation of the persistence port"""

    def __init__(self, database_url: str = "sqlite:///./data/entities.db"):
        # Public: Database URL
        self.database_url = database_url

        # Private: SQLAlchemy engine and session factory
        self.__engine = None
        self.__SessionLocal = None

    def connect(self):
        """Create the engine and session factory"""
        url = make_url(self.database_url)
        engine_kwargs = {"echo": False}  # Set echo to True for SQL debug logging

        if url.get_backend_name() == "sqlite":
            # Allow multi-threaded access
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # One shared connection, otherwise each session sees its own empty database
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        try:
            self.__engine = create_engine(url, **engine_kwargs)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Cannot create engine: {e}", operation="connect") from e

        self.__SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.__engine
        )
        logger.info(f"Connected to database: {url.render_as_string(hide_password=True)}")

    def disconnect(self):
        """Dispose of the engine"""
        if self.__engine:
            self.__engine.dispose()
            self.__engine = None
            self.__SessionLocal = None
        logger.info("Disconnected from database")

    def is_connected(self) -> bool:
        return self.__engine is not None

    def initialize_schema(self):
        """Create tables if they don't exist"""
        if not self.__engine:
            raise StoreUnavailableError("Database not connected", operation="initialize_schema")

        try:
            Base.metadata.create_all(self.__engine)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Database unavailable: {e}", operation="initialize_schema") from e
        logger.info("Database schema initialized")

    @contextmanager
    def _session(self, operation: str):
        """
        Context manager for a short-lived session.

        Commits on success, rolls back on failure and translates
        SQLAlchemy errors into StoreUnavailableError.

        Yields:
            Session: SQLAlchemy session
        """
        if not self.__SessionLocal:
            raise StoreUnavailableError("Database not connected", operation=operation)

        session: Session = self.__SessionLocal()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error during {operation}: {e}")
            raise StoreUnavailableError(f"Database unavailable: {e}", operation=operation) from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def save(self, entity: EntityModel) -> None:
        """Upsert an entity by id"""
        with self._session("save") as session:
            session.merge(pydantic_to_orm(entity))
        logger.debug(f"Saved entity {entity.id}")

    def delete(self, entity_id: str) -> None:
        """Delete an entity by id, raising RecordNotFoundError if absent"""
        with self._session("delete") as session:
            result = session.execute(delete(EntityORM).where(EntityORM.id == entity_id))
            if result.rowcount == 0:
                raise RecordNotFoundError(entity_id)
        logger.debug(f"Deleted entity {entity_id}")

    def delete_all(self) -> None:
        """Delete every row in the entities table"""
        with self._session("delete_all") as session:
            result = session.execute(delete(EntityORM))
        logger.debug(f"Deleted {result.rowcount} entities")

    def find_by_id(self, entity_id: str) -> Optional[EntityModel]:
        """Look up an entity by id"""
        with self._session("find_by_id") as session:
            entity_orm = session.get(EntityORM, entity_id)
            if entity_orm is None:
                return None
            return orm_to_pydantic(entity_orm)

    def entity_count(self) -> int:
        """Get total number of entities in the database"""
        with self._session("entity_count") as session:
            count = session.execute(select(func.count(EntityORM.id))).scalar()
            return count or 0
