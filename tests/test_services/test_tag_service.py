"""
Tests for TagService against the SQLite test database.
"""

import pytest

from tag_api.core.exceptions import (
    EntityAlreadyExistsException,
    EntityNotExistException,
    EntityNotFoundException,
)
from tag_api.models.tag import MAX_TAG_ID
from tag_api.schemas.tag import TagDto
from tag_api.services.tag_service import TagService


@pytest.mark.asyncio
async def test_create_assigns_increasing_ids(db_session):
    service = TagService(db_session)

    first = await service.create_tag(TagDto(name="sale"))
    second = await service.create_tag(TagDto(name="winter"))

    assert second > first
    assert await service.find_tag_by_id(second) == TagDto(id=second, name="winter")


@pytest.mark.asyncio
async def test_create_duplicate_reports_existing_id(db_session):
    service = TagService(db_session)
    tag_id = await service.create_tag(TagDto(name="sale"))

    with pytest.raises(EntityAlreadyExistsException) as exc_info:
        await service.create_tag(TagDto(name="sale"))

    assert exc_info.value.id == tag_id


@pytest.mark.asyncio
async def test_find_missing_tag(db_session):
    with pytest.raises(EntityNotFoundException) as exc_info:
        await TagService(db_session).find_tag_by_id(42)

    assert exc_info.value.id == 42


@pytest.mark.asyncio
async def test_delete_tag(db_session):
    service = TagService(db_session)
    tag_id = await service.create_tag(TagDto(name="sale"))

    await service.delete_tag(tag_id)

    with pytest.raises(EntityNotFoundException):
        await service.find_tag_by_id(tag_id)


@pytest.mark.asyncio
async def test_delete_missing_tag(db_session):
    with pytest.raises(EntityNotExistException) as exc_info:
        await TagService(db_session).delete_tag(5)

    assert exc_info.value.id == 5


@pytest.mark.asyncio
async def test_out_of_range_ids_are_absent(db_session):
    service = TagService(db_session)

    with pytest.raises(EntityNotFoundException):
        await service.find_tag_by_id(MAX_TAG_ID + 1)
    with pytest.raises(EntityNotExistException):
        await service.delete_tag(-2**64)
