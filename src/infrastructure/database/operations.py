"""
Database engine and session management for the client state store
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.infrastructure.configuration.config import Settings, get_config
from src.infrastructure.database.models import Base
from src.infrastructure.logging.logging_config import PerformanceLogger
from src.infrastructure.utilities.exceptions import ClientStateError


class DatabaseManager:
    """Owns the engine and session factory of the client state database"""

    def __init__(self, config: Optional[Settings] = None, database_url: Optional[str] = None):
        self.config = config or get_config()
        self.database_url = database_url or self.config.client_state_database_url
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self.logger = logging.getLogger(__name__)

    def get_engine(self) -> Engine:
        """Get database engine with proper configuration"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        url = make_url(self.database_url)
        engine_kwargs: Dict[str, Any] = {"pool_pre_ping": True}

        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # A single shared connection, otherwise every session gets its own empty database
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        return create_engine(self.database_url, **engine_kwargs)

    def get_session_factory(self) -> sessionmaker:
        """Get session factory"""
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.get_engine(), expire_on_commit=False)
        return self._session_factory

    def get_session(self) -> Session:
        """Get database session"""
        return self.get_session_factory()()

    def create_tables(self) -> None:
        """Create all database tables"""
        try:
            with PerformanceLogger("create_tables", self.logger):
                Base.metadata.create_all(self.get_engine())
                self.logger.info("Client state tables ready")
        except SQLAlchemyError as e:
            self.logger.error("Failed to create client state tables: %s", e, exc_info=True)
            raise ClientStateError(f"Failed to create client state tables: {e}", "create_tables") from e

    def health_check(self) -> Dict[str, Any]:
        """Perform database health check"""
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1"))
            return {"status": "healthy", "database_url": self.database_url}
        except SQLAlchemyError as e:
            self.logger.error("Client state health check failed: %s", e)
            return {"status": "unhealthy", "error": str(e)}

    def close(self) -> None:
        """Close database connections"""
        if self._engine:
            self._engine.dispose()
            self._engine = None
        self._session_factory = None
        self.logger.info("Client state database connections closed")


def init_db(database_manager: Optional[DatabaseManager] = None) -> DatabaseManager:
    """Create the client state tables and return the manager used"""
    manager = database_manager or DatabaseManager()
    manager.create_tables()
    return manager
