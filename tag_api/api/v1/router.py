"""
API v1 Router - Aggregates all v1 endpoints.
Base Path: /api/v1
"""

from fastapi import APIRouter

from tag_api.api.v1 import tags, health

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
