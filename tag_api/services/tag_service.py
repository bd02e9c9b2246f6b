"""
Tag service - persistence operations for tags.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tag_api.core.exceptions import (
    EntityAlreadyExistsException,
    EntityNotExistException,
    EntityNotFoundException,
)
from tag_api.models.tag import MAX_TAG_ID, MIN_TAG_ID, Tag
from tag_api.schemas.tag import TagDto

logger = logging.getLogger(__name__)


class TagService:
    """Service class for tag operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_tag(self, tag_dto: TagDto) -> int:
        """
        Store a new tag.

        Args:
            tag_dto: Validated tag payload

        Returns:
            Id of the created tag

        Raises:
            EntityAlreadyExistsException: If a tag with the same name exists
        """
        existing = await self._find_by_name(tag_dto.name)
        if existing is not None:
            raise EntityAlreadyExistsException(existing.id)

        tag = Tag(name=tag_dto.name)
        self.db.add(tag)
        try:
            await self.db.flush()
        except IntegrityError:
            # Lost a race against a concurrent insert of the same name
            await self.db.rollback()
            existing = await self._find_by_name(tag_dto.name)
            if existing is None:
                raise
            raise EntityAlreadyExistsException(existing.id)

        logger.info(f"Created tag {tag.id} ({tag.name})")
        return tag.id

    async def find_tag_by_id(self, tag_id: int) -> TagDto:
        """
        Get a tag by id.

        Raises:
            EntityNotFoundException: If no tag has this id
        """
        tag = await self._get(tag_id)
        if tag is None:
            raise EntityNotFoundException(tag_id)
        return TagDto.model_validate(tag)

    async def delete_tag(self, tag_id: int) -> None:
        """
        Delete a tag by id.

        Raises:
            EntityNotExistException: If no tag has this id
        """
        tag = await self._get(tag_id)
        if tag is None:
            raise EntityNotExistException(tag_id)

        await self.db.delete(tag)
        await self.db.flush()
        logger.info(f"Deleted tag {tag_id}")

    async def _get(self, tag_id: int) -> Tag | None:
        # Ids outside the column range can never have been assigned
        if not MIN_TAG_ID <= tag_id <= MAX_TAG_ID:
            return None
        return await self.db.get(Tag, tag_id)

    async def _find_by_name(self, name: str) -> Tag | None:
        result = await self.db.execute(select(Tag).where(Tag.name == name))
        return result.scalar_one_or_none()
