"""
Tag endpoints: create, fetch by id, delete.
"""

from fastapi import APIRouter, status

from tag_api.core.exceptions import NotValidFieldsException
from tag_api.dependencies import Locale, Messages, Tags, Validator
from tag_api.schemas.response import CustomCode, CustomResponse
from tag_api.schemas.tag import TagDto

TAG_WAS_CREATED_MESSAGE = "tag_was_created"
TAG_WAS_DELETED_MESSAGE = "tag_was_deleted"

router = APIRouter()


@router.post("", response_model=CustomResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    tag_dto: TagDto,
    service: Tags,
    validator: Validator,
    messages: Messages,
    locale: Locale,
):
    """
    Create a new tag.

    Every invalid field is reported in a single 400 response.
    """
    field_errors = validator.validate(tag_dto)
    if field_errors:
        raise NotValidFieldsException(field_errors)

    tag_id = await service.create_tag(tag_dto)
    return CustomResponse(
        code=CustomCode.TAG_WAS_CREATED,
        message=messages.get_message(TAG_WAS_CREATED_MESSAGE, tag_id, locale=locale),
    )


@router.get("/{tag_id}", response_model=TagDto)
async def find_tag_by_id(tag_id: int, service: Tags):
    """Get a tag by id. Returns the bare tag record."""
    return await service.find_tag_by_id(tag_id)


@router.delete("/{tag_id}", response_model=CustomResponse)
async def delete_tag(
    tag_id: int,
    service: Tags,
    messages: Messages,
    locale: Locale,
):
    """Delete a tag by id."""
    await service.delete_tag(tag_id)
    return CustomResponse(
        code=CustomCode.TAG_WAS_DELETED,
        message=messages.get_message(TAG_WAS_DELETED_MESSAGE, tag_id, locale=locale),
    )
