"""
Database boundary: ORM base, connection management, models and CRUD.
"""

from uml_assistant.boundary.db.base import Base
from uml_assistant.boundary.db.connection import get_async_db, get_async_session_factory

__all__ = ["Base", "get_async_db", "get_async_session_factory"]
