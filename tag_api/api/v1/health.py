"""
Health endpoint.
"""

from fastapi import APIRouter
from sqlalchemy import func, select, text

from tag_api.db.session import is_using_sqlite_fallback
from tag_api.dependencies import DbSession
from tag_api.models.tag import Tag

router = APIRouter()


@router.get("/health")
async def health_check(db: DbSession):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok", ...} when service is healthy
        {"status": "degraded", "issues": [...]} when the database is unreachable
    """
    issues = []

    try:
        await db.execute(text("SELECT 1"))
        tag_count = (await db.execute(select(func.count(Tag.id)))).scalar() or 0
    except Exception as e:
        issues.append(f"Database: {str(e)}")

    if issues:
        return {
            "status": "degraded",
            "issues": issues,
        }

    return {
        "status": "ok",
        "database": "sqlite (dev fallback)" if is_using_sqlite_fallback() else "postgresql",
        "tags": tag_count,
    }
