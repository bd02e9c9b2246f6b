"""
Translation of domain exceptions into localized response envelopes.

Every TagAPIException subclass maps to exactly one
(status, code, message key) entry in ERROR_TRANSLATIONS.
"""

import logging
from typing import NamedTuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tag_api.config import get_settings
from tag_api.core.exceptions import (
    EntityAlreadyExistsException,
    EntityNotExistException,
    EntityNotFoundException,
    NotValidFieldsException,
    TagAPIException,
)
from tag_api.core.locale import LocaleService, get_locale_service, resolve_locale
from tag_api.schemas.response import CustomCode, CustomResponse

logger = logging.getLogger(__name__)

REQUEST_NOT_VALID = "request_not_valid"
INTERNAL_ERROR = "internal_error"


class ErrorTranslation(NamedTuple):
    status_code: int
    code: CustomCode
    message_key: str | None


ERROR_TRANSLATIONS: dict[type[TagAPIException], ErrorTranslation] = {
    EntityNotFoundException: ErrorTranslation(
        status.HTTP_404_NOT_FOUND, CustomCode.TAG_NOT_FOUND, "entity_not_found"
    ),
    EntityNotExistException: ErrorTranslation(
        status.HTTP_400_BAD_REQUEST, CustomCode.TAG_NOT_EXIST, "entity_not_exist"
    ),
    # Mirrors the creation success code and message; kept as observed.
    EntityAlreadyExistsException: ErrorTranslation(
        status.HTTP_400_BAD_REQUEST, CustomCode.TAG_WAS_CREATED, "tag_was_created"
    ),
    # Message is built from the individual field errors.
    NotValidFieldsException: ErrorTranslation(
        status.HTTP_400_BAD_REQUEST, CustomCode.TAG_FIELDS_NOT_VALID, None
    ),
}


def get_translation(exc: TagAPIException) -> ErrorTranslation:
    """
    Find the translation entry for an exception, walking its MRO.

    Raises:
        KeyError: If no entry covers the exception type
    """
    for cls in type(exc).__mro__:
        if cls in ERROR_TRANSLATIONS:
            return ERROR_TRANSLATIONS[cls]
    raise KeyError(f"No error translation for {type(exc).__name__}")


def build_error_response(
    exc: TagAPIException,
    locale_service: LocaleService,
    locale: str,
) -> tuple[int, CustomResponse]:
    """
    Build the status code and envelope for a domain exception.

    Validation failures join the localized text of every field error,
    in the order the validator reported them.
    """
    translation = get_translation(exc)

    if isinstance(exc, NotValidFieldsException):
        message = " ".join(
            locale_service.get_message(error.code, *error.args, locale=locale)
            for error in exc.field_errors
        )
    else:
        message = locale_service.get_message(translation.message_key, exc.id, locale=locale)

    return translation.status_code, CustomResponse(code=translation.code, message=message)


def request_locale(request: Request) -> str:
    """Resolve the locale for a request from its Accept-Language header."""
    settings = get_settings()
    return resolve_locale(
        request.headers.get("accept-language"),
        settings.SUPPORTED_LOCALES,
        settings.DEFAULT_LOCALE,
    )


async def tag_api_exception_handler(request: Request, exc: TagAPIException) -> JSONResponse:
    """Translate a domain exception into a localized envelope."""
    logger.info(f"{request.method} {request.url.path} -> {type(exc).__name__}: {exc}")
    status_code, body = build_error_response(
        exc, get_locale_service(), request_locale(request)
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed requests rejected by the framework before reaching a route."""
    logger.info(f"{request.method} {request.url.path} -> invalid request: {exc.errors()}")
    body = CustomResponse(
        code=CustomCode.TAG_FIELDS_NOT_VALID,
        message=get_locale_service().get_message(
            REQUEST_NOT_VALID, locale=request_locale(request)
        ),
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized envelope.
    """
    logger.exception(f"Unexpected error: {exc}")
    body = CustomResponse(
        code=CustomCode.INTERNAL_ERROR,
        message=get_locale_service().get_message(
            INTERNAL_ERROR, locale=request_locale(request)
        ),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TagAPIException, tag_api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
