"""SQLAlchemy ORM models for the Tag API."""

from tag_api.models.tag import Tag

__all__ = ["Tag"]
