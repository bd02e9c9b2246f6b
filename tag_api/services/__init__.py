"""
Business logic services for the Tag API.
Services handle persistence separate from API endpoints.
"""

from tag_api.services.tag_service import TagService

__all__ = [
    "TagService",
]
