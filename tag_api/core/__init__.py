"""Core utilities, exceptions and localization for the Tag API."""

from tag_api.core.exceptions import (
    TagAPIException,
    EntityNotFoundException,
    EntityNotExistException,
    EntityAlreadyExistsException,
    NotValidFieldsException,
)

__all__ = [
    "TagAPIException",
    "EntityNotFoundException",
    "EntityNotExistException",
    "EntityAlreadyExistsException",
    "NotValidFieldsException",
]
