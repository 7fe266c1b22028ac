"""
Database Infrastructure

Contains the SQLAlchemy model and engine management of the client state store.
"""

from .models import Base, ClientStateEntry
from .operations import DatabaseManager, init_db

__all__ = [
    "Base",
    "ClientStateEntry",
    "DatabaseManager",
    "init_db",
]
