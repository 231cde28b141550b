"""
Search API Endpoints

Member directory search endpoints:
- Ranked text search over approved profiles with exact-match filters
- Autocomplete suggestions mined from profile fields
- Location and country facets
- Per-user search history
"""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Query, Response, status

from member_directory.api.dependencies import (
    SearchHistoryServiceDep,
    SearchServiceDep,
    SuggestionServiceDep,
    map_domain_exception_to_http,
)
from member_directory.api.schemas.search_schemas import (
    FacetValuesResponse,
    ProfileSearchResponse,
    ProfileSearchResult,
    SearchFiltersModel,
    SearchHistoryCreate,
    SearchHistoryResponse,
    SuggestionResponse,
)
from member_directory.core.config import get_settings
from member_directory.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/search", tags=["search"])


def _unexpected_error(exc: Exception, error: str, message: str) -> HTTPException:
    settings = get_settings()
    detail = {"error": error, "message": message}
    if settings.is_local() or settings.ENVIRONMENT == "development":
        detail["details"] = str(exc)
    return HTTPException(status_code=500, detail=detail)


@router.get("/profiles", response_model=ProfileSearchResponse)
async def search_profiles(
    search_service: SearchServiceDep,
    query: Optional[str] = Query(None, max_length=500, description="Free text; blank lists everything"),
    category: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    country: Optional[str] = Query(None),
    verified_only: bool = Query(False),
) -> ProfileSearchResponse:
    """
    Search approved member profiles.

    Every query token is matched as a prefix of the words in skills,
    profession, category and location. Filters are exact matches and all
    must hold. At most 50 results are returned, best match first.
    """
    try:
        results = await search_service.search_profiles(
            query=query,
            category=category,
            location=location,
            country=country,
            verified_only=verified_only,
        )
        return ProfileSearchResponse(
            query=(query or "").strip(),
            filters=SearchFiltersModel(
                category=category,
                location=location,
                country=country,
                verified_only=verified_only,
            ),
            total_count=len(results),
            results=[ProfileSearchResult.from_hydrated(item) for item in results],
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as exc:  # pragma: no cover - unexpected errors bubble to API layer
        logger.error("Search request failed", error=str(exc))
        raise _unexpected_error(exc, "search_failed", "Search request could not be completed")


@router.get("/suggestions", response_model=SuggestionResponse)
async def get_suggestions(
    suggestion_service: SuggestionServiceDep,
    query: str = Query("", max_length=100),
) -> SuggestionResponse:
    """Autocomplete values from approved profiles (empty below two characters)."""
    try:
        suggestions = await suggestion_service.get_suggestions(query)
        return SuggestionResponse(query=query, suggestions=suggestions)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as exc:  # pragma: no cover
        logger.error("Suggestion request failed", error=str(exc))
        raise _unexpected_error(exc, "suggestions_failed", "Suggestions could not be generated")


@router.get("/locations", response_model=FacetValuesResponse)
async def list_locations(search_service: SearchServiceDep) -> FacetValuesResponse:
    """Distinct locations of approved profiles."""
    try:
        return FacetValuesResponse(values=await search_service.list_locations())
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/countries", response_model=FacetValuesResponse)
async def list_countries(search_service: SearchServiceDep) -> FacetValuesResponse:
    """Distinct countries of approved profiles."""
    try:
        return FacetValuesResponse(values=await search_service.list_countries())
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post(
    "/history",
    response_model=SearchHistoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_search_history(
    payload: SearchHistoryCreate,
    history_service: SearchHistoryServiceDep,
) -> SearchHistoryResponse:
    """Record an executed search for a member."""
    try:
        entry = await history_service.save_search_history(
            user_id=str(payload.user_id),
            query=payload.query,
            filters=payload.filters.model_dump(exclude_defaults=True),
        )
        return SearchHistoryResponse.from_domain(entry)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as exc:  # pragma: no cover
        logger.error("Failed to record search history", error=str(exc))
        raise _unexpected_error(exc, "history_save_failed", "Search history could not be saved")


@router.get("/history/{user_id}", response_model=list[SearchHistoryResponse])
async def get_search_history(
    user_id: str,
    history_service: SearchHistoryServiceDep,
    limit: Optional[int] = Query(None, description="Defaults to 10"),
) -> list[SearchHistoryResponse]:
    """Most recent searches of a member, newest first."""
    try:
        entries = await history_service.get_search_history(user_id, limit=limit)
        return [SearchHistoryResponse.from_domain(entry) for entry in entries]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/history/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def clear_search_history(
    user_id: str,
    history_service: SearchHistoryServiceDep,
) -> Response:
    """Delete every history entry of a member. Safe to retry after a failure."""
    try:
        await history_service.clear_search_history(user_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/history/{user_id}/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_search_history_entry(
    user_id: str,
    entry_id: str,
    history_service: SearchHistoryServiceDep,
) -> Response:
    """Delete one history entry; deleting a missing entry is a no-op."""
    try:
        await history_service.delete_search_history_entry(user_id, entry_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
