"""
API Package

Versioned HTTP routes for the member directory.

Note: Routers are imported lazily to avoid circular import issues with application services.
"""

from fastapi import APIRouter


def create_api_router() -> APIRouter:
    """Create the main API router with all v1 routes."""
    from member_directory.api.v1.search import router as search_router

    api_router = APIRouter()
    api_router.include_router(
        search_router,
        prefix="/api/v1",
        tags=["search"]
    )

    return api_router


__all__ = ["create_api_router"]
