"""
FastAPI dependencies for application services.

Services are built per request from the dependency factories, which hand
out singleton repository adapters.
"""

from typing import Annotated

import structlog
from fastapi import Depends, HTTPException

from member_directory.application.search_history_service import SearchHistoryApplicationService
from member_directory.application.search_service import SearchApplicationService
from member_directory.application.suggestion_service import SuggestionApplicationService
from member_directory.domain.exceptions import (
    DomainException,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from member_directory.infrastructure.factories import (
    get_search_dependencies,
    get_search_history_dependencies,
    get_suggestion_dependencies,
)

logger = structlog.get_logger(__name__)


async def get_search_service() -> SearchApplicationService:
    """Create SearchApplicationService with injected dependencies."""
    try:
        dependencies = await get_search_dependencies()
        return SearchApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create search service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Search service unavailable"
        ) from e


async def get_suggestion_service() -> SuggestionApplicationService:
    """Create SuggestionApplicationService with injected dependencies."""
    try:
        dependencies = await get_suggestion_dependencies()
        return SuggestionApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create suggestion service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Suggestion service unavailable"
        ) from e


async def get_search_history_service() -> SearchHistoryApplicationService:
    """Create SearchHistoryApplicationService with injected dependencies."""
    try:
        dependencies = await get_search_history_dependencies()
        return SearchHistoryApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create search history service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Search history service unavailable"
        ) from e


SearchServiceDep = Annotated[SearchApplicationService, Depends(get_search_service)]
SuggestionServiceDep = Annotated[SuggestionApplicationService, Depends(get_suggestion_service)]
SearchHistoryServiceDep = Annotated[SearchHistoryApplicationService, Depends(get_search_history_service)]


# Domain Exception Handlers
def map_domain_exception_to_http(exception: Exception) -> HTTPException:
    """Map domain exceptions to appropriate HTTP responses."""

    # NotFoundError hierarchy - 404 Not Found
    if isinstance(exception, NotFoundError):
        return HTTPException(status_code=404, detail=str(exception))

    # ValidationError - 400 Bad Request
    elif isinstance(exception, ValidationError):
        return HTTPException(status_code=400, detail=str(exception))

    # Store could not be reached - 503 Service Unavailable
    elif isinstance(exception, StoreUnavailableError):
        logger.error("Store unavailable", error=str(exception))
        return HTTPException(status_code=503, detail="Directory store unavailable")

    # Generic DomainException - 500 Internal Server Error
    elif isinstance(exception, DomainException):
        logger.error("Unhandled domain exception", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Domain operation failed")

    else:
        # Non-domain exception - log and return generic error
        logger.error("Non-domain exception in mapping", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Internal server error")


__all__ = [
    "get_search_service",
    "get_suggestion_service",
    "get_search_history_service",
    "SearchServiceDep",
    "SuggestionServiceDep",
    "SearchHistoryServiceDep",
    "map_domain_exception_to_http",
]
