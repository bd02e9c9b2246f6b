"""
Tag API - Main Application Entry Point.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tag_api import __version__
from tag_api.api.v1.router import api_router
from tag_api.config import get_settings
from tag_api.core.errors import register_exception_handlers

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Default locale: {settings.DEFAULT_LOCALE} (supported: {settings.SUPPORTED_LOCALES})")

    from tag_api.db.session import engine, is_using_sqlite_fallback

    # Auto-create tables for SQLite (dev mode); PostgreSQL uses migrations
    if is_using_sqlite_fallback():
        logger.warning("[DEV MODE] Using SQLite fallback database")
        from tag_api.db.base import Base
        from tag_api.models import Tag  # noqa: F401
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Development database ready")
    else:
        logger.info("Database: PostgreSQL")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    await engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Create, fetch and delete tags. Messages are localized via Accept-Language.",
    version=__version__,
    openapi_tags=[
        {"name": "tags", "description": "Tag management operations"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Basic service information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "api": settings.API_V1_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tag_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
