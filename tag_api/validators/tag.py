"""
Field-level validation of submitted tags.
"""

from typing import Any, NamedTuple

from tag_api.schemas.tag import TagDto

TAG_NAME_EMPTY = "tag_name_empty"
TAG_NAME_LENGTH = "tag_name_length"
TAG_ID_NOT_ALLOWED = "tag_id_not_allowed"


class FieldError(NamedTuple):
    """A rejected field and the message key describing the problem."""

    field: str
    code: str
    args: tuple[Any, ...] = ()


class TagValidator:
    """
    Checks a tag submitted for creation.

    Every violated rule is reported, in a fixed order: name rules first,
    then the id rule. A blank name skips the length check.
    """

    def __init__(self, min_length: int = 1, max_length: int = 45):
        if min_length < 0 or max_length < min_length:
            raise ValueError(
                f"Invalid tag name bounds: [{min_length}, {max_length}]"
            )
        self.min_length = min_length
        self.max_length = max_length

    def validate(self, tag: TagDto) -> list[FieldError]:
        errors: list[FieldError] = []

        name = tag.name
        if name is None or not name.strip():
            errors.append(FieldError("name", TAG_NAME_EMPTY))
        elif not self.min_length <= len(name) <= self.max_length:
            errors.append(
                FieldError("name", TAG_NAME_LENGTH, (self.min_length, self.max_length))
            )

        if tag.id:
            errors.append(FieldError("id", TAG_ID_NOT_ALLOWED))

        return errors
