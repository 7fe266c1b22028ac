"""
SQLAlchemy Client State Repository

Concrete implementation of ClientStateRepository using SQLAlchemy ORM.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from src.domain.repositories.client_state_repository import ClientStateRepository
from src.infrastructure.database.models import ClientStateEntry
from src.infrastructure.database.operations import DatabaseManager
from src.infrastructure.repositories.session_handler import managed_session
from src.infrastructure.utilities.exceptions import ClientStateError


class SQLAlchemyClientStateRepository(ClientStateRepository):
    """SQLAlchemy implementation of the client state key/value store"""

    def __init__(self, database_manager: DatabaseManager):
        self._database_manager = database_manager
        self._logger = logging.getLogger(self.__class__.__name__)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.get_many([key]).get(key, default)

    def get_many(self, keys: Iterable[str]) -> Dict[str, Any]:
        keys = list(keys)
        try:
            with managed_session(self._database_manager.get_session_factory()) as session:
                entries = session.scalars(
                    select(ClientStateEntry).where(ClientStateEntry.key.in_(keys))
                ).all()
                return {entry.key: entry.value for entry in entries}
        except SQLAlchemyError as e:
            self._logger.error("💥 CLIENT STATE READ FAILED for %s: %s", keys, e)
            raise ClientStateError(f"Failed to read client state: {e}", "get_many") from e

    def set_many(self, values: Dict[str, Any]) -> None:
        if not values:
            return
        try:
            with managed_session(self._database_manager.get_session_factory()) as session:
                for key, value in values.items():
                    # merge() turns this into an upsert on the primary key
                    session.merge(ClientStateEntry(key=key, value=value))
            self._logger.debug("💾 CLIENT STATE SAVED: %s", sorted(values))
        except SQLAlchemyError as e:
            self._logger.error("💥 CLIENT STATE WRITE FAILED for %s: %s", sorted(values), e)
            raise ClientStateError(f"Failed to write client state: {e}", "set_many") from e

    def delete(self, key: str) -> None:
        try:
            with managed_session(self._database_manager.get_session_factory()) as session:
                session.execute(delete(ClientStateEntry).where(ClientStateEntry.key == key))
        except SQLAlchemyError as e:
            self._logger.error("💥 CLIENT STATE DELETE FAILED for %s: %s", key, e)
            raise ClientStateError(f"Failed to delete client state: {e}", "delete") from e
