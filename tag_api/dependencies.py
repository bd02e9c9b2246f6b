"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tag_api.config import Settings, get_settings
from tag_api.core.errors import request_locale
from tag_api.core.locale import LocaleService, get_locale_service
from tag_api.db.session import get_db
from tag_api.services.tag_service import TagService
from tag_api.validators.tag import TagValidator


DbSession = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_tag_service(db: DbSession) -> TagService:
    return TagService(db)


def get_tag_validator(settings: AppSettings) -> TagValidator:
    return TagValidator(
        min_length=settings.TAG_NAME_MIN_LENGTH,
        max_length=settings.TAG_NAME_MAX_LENGTH,
    )


def get_request_locale(request: Request) -> str:
    """
    Locale for the current request, from the Accept-Language header.

    Returns:
        A supported locale code, or the default locale
    """
    return request_locale(request)


Tags = Annotated[TagService, Depends(get_tag_service)]
Validator = Annotated[TagValidator, Depends(get_tag_validator)]
Locale = Annotated[str, Depends(get_request_locale)]
Messages = Annotated[LocaleService, Depends(get_locale_service)]
