# pylint: disable=too-few-public-methods
"""
SQLAlchemy database models for the persisted client state

One key/value table: every session field is stored under its own key with
a JSON value.
"""

from datetime import datetime
from typing import Any, Optional, Type

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import DeclarativeMeta, Mapped, declarative_base, mapped_column
from sqlalchemy.sql import func

# Create declarative base with proper type annotation
_Base = declarative_base()

# Type alias for mypy
Base: Type[DeclarativeMeta] = _Base


class ClientStateEntry(Base):
    """Client state entry"""
    __tablename__ = "client_state"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<ClientStateEntry(key='{self.key}')>"
