"""
Async SQLAlchemy engine and per-request sessions.

An explicitly configured DATABASE_URL wins; otherwise the SQLite file
fallback is used for local development when it is enabled.
"""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from tag_api.config import Settings, get_settings

logger = logging.getLogger(__name__)


def resolve_database_url(settings: Settings) -> tuple[str, bool]:
    """
    Choose the database URL for these settings.

    Returns:
        Tuple of (url, whether the SQLite fallback is in use)
    """
    if "DATABASE_URL" not in settings.model_fields_set and settings.USE_SQLITE_FALLBACK:
        return settings.SQLITE_FALLBACK_URL, True
    return settings.DATABASE_URL, False


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_async_engine(url, echo=echo, pool_size=5, max_overflow=10, pool_pre_ping=True)


_settings = get_settings()
_database_url, _using_sqlite_fallback = resolve_database_url(_settings)
if _using_sqlite_fallback:
    logger.warning(f"DATABASE_URL not set, using SQLite fallback: {_database_url}")

engine = build_engine(_database_url, echo=_settings.DEBUG)
AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


def is_using_sqlite_fallback() -> bool:
    return _using_sqlite_fallback


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Session dependency: commit when the request succeeds, roll back when it raises."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
