"""
Domain exceptions for the Tag API.

Each exception carries only the context needed to build a localized
message. Status codes and message keys live in tag_api.core.errors.
"""

from collections.abc import Sequence

from tag_api.validators.tag import FieldError


class TagAPIException(Exception):
    """Base exception for all Tag API domain errors."""


class EntityNotFoundException(TagAPIException):
    """Lookup target does not exist."""

    def __init__(self, entity_id: int):
        self.id = entity_id
        super().__init__(f"Entity with id {entity_id} not found")


class EntityNotExistException(TagAPIException):
    """Write or delete target does not exist."""

    def __init__(self, entity_id: int):
        self.id = entity_id
        super().__init__(f"Entity with id {entity_id} does not exist")


class EntityAlreadyExistsException(TagAPIException):
    """A duplicate create was attempted. ``id`` is the existing record."""

    def __init__(self, entity_id: int):
        self.id = entity_id
        super().__init__(f"Entity already exists with id {entity_id}")


class NotValidFieldsException(TagAPIException):
    """Submitted payload failed validation."""

    def __init__(self, field_errors: Sequence[FieldError]):
        self.field_errors = list(field_errors)
        fields = ", ".join(error.field for error in self.field_errors)
        super().__init__(f"Fields not valid: {fields}")
