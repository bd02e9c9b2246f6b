"""
Pydantic schemas for request/response validation.
"""

from tag_api.schemas.tag import TagDto
from tag_api.schemas.response import CustomCode, CustomResponse

__all__ = [
    "TagDto",
    "CustomCode",
    "CustomResponse",
]
