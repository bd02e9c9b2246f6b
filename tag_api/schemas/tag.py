"""
Pydantic schemas for Tag request/response bodies.
"""

from pydantic import BaseModel, ConfigDict, Field


class TagDto(BaseModel):
    """
    Tag record exchanged with clients and the persistence layer.

    ``id`` stays 0 until the tag has been stored. Field constraints are
    deliberately loose here; TagValidator reports every rule violation
    so they can be translated together.
    """

    id: int = Field(default=0, description="Tag identifier, 0 until created")
    name: str | None = Field(default=None, description="Tag name")

    model_config = ConfigDict(from_attributes=True)
