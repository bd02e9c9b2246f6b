"""Request payload validators."""

from tag_api.validators.tag import FieldError, TagValidator

__all__ = ["FieldError", "TagValidator"]
