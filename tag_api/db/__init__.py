"""Database module for the Tag API."""

from tag_api.db.base import Base
from tag_api.db.session import get_db, engine, AsyncSessionLocal

__all__ = ["Base", "get_db", "engine", "AsyncSessionLocal"]
