"""
Uniform response envelope returned for every non-GET outcome.
"""

import enum

from pydantic import BaseModel, ConfigDict, Field


class CustomCode(enum.IntEnum):
    """Application status codes carried in the response envelope."""
    TAG_WAS_DELETED = 20001
    TAG_WAS_CREATED = 20101
    TAG_FIELDS_NOT_VALID = 40001
    TAG_NOT_EXIST = 40002
    TAG_NOT_FOUND = 40401
    INTERNAL_ERROR = 50001


class CustomResponse(BaseModel):
    """
    Response envelope.

    Examples:
        201: {"code": 20101, "message": "Tag was created (id = 7)."}
        404: {"code": 40401, "message": "Requested resource not found (id = 42)."}
    """

    code: int = Field(..., description="Application status code")
    message: str = Field(..., description="Localized human-readable message")

    model_config = ConfigDict(frozen=True)
