"""Application layer orchestrator for search history workflows following hexagonal architecture."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

import structlog

from member_directory.domain.entities.search_history import SearchFilters, SearchHistoryEntry
from member_directory.domain.exceptions import SearchHistoryNotFoundError, ValidationError
from member_directory.domain.value_objects import SearchHistoryId, UserId

if TYPE_CHECKING:
    from member_directory.application.dependencies.search_history_dependencies import (
        SearchHistoryDependencies,
    )


logger = structlog.get_logger(__name__)


def _parse_id(value: Any, factory, label: str):
    try:
        return factory(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc


class SearchHistoryApplicationService:
    """
    Coordinates the per-user log of executed searches.

    Entries are append-only: saving never deduplicates and nothing is ever
    updated in place. Reads are newest first.
    """

    def __init__(self, dependencies: SearchHistoryDependencies) -> None:
        """Initialize with injected dependencies.

        Args:
            dependencies: History repository and default page size
        """
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def save_search_history(
        self,
        user_id: str,
        query: str,
        filters: Optional[Mapping[str, Any] | SearchFilters] = None,
    ) -> SearchHistoryEntry:
        """Record an executed search for a user.

        Args:
            user_id: User identifier
            query: Literal text that was searched
            filters: Filters applied to the search, stored verbatim

        Returns:
            The stored entry
        """
        owner = _parse_id(user_id, UserId, "user_id")
        if not isinstance(query, str):
            raise ValidationError("Search query must be a string")
        search_filters = SearchFilters.from_mapping(filters)

        entry = SearchHistoryEntry.record(owner, query, search_filters)
        stored = await self._deps.search_history_repository.add(entry)

        self._logger.info(
            "Search history recorded",
            user_id=str(owner),
            entry_id=str(stored.id),
        )

        return stored

    async def get_search_history(
        self,
        user_id: str,
        limit: Optional[int] = None,
    ) -> List[SearchHistoryEntry]:
        """Get the most recent searches for a user.

        Args:
            user_id: User identifier
            limit: Maximum entries to return (defaults to the configured value)

        Returns:
            Entries ordered newest first
        """
        owner = _parse_id(user_id, UserId, "user_id")
        if limit is None:
            limit = self._deps.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError("History limit must be a positive integer")

        self._logger.debug(
            "Retrieving search history",
            user_id=str(owner),
            limit=limit,
        )

        return await self._deps.search_history_repository.list_by_user(owner, limit)

    async def clear_search_history(self, user_id: str) -> int:
        """Delete every search history entry owned by a user.

        Deletes are issued independently and concurrently. Every delete is
        attempted; if any of them failed, the first failure is raised once
        all attempts have finished. Retrying is safe.

        Returns:
            Number of entries deleted
        """
        owner = _parse_id(user_id, UserId, "user_id")
        repository = self._deps.search_history_repository

        entry_ids = await repository.list_ids_by_user(owner)
        outcomes = await asyncio.gather(
            *(repository.delete(entry_id) for entry_id in entry_ids),
            return_exceptions=True,
        )

        failures = [outcome for outcome in outcomes if isinstance(outcome, Exception)]
        deleted = sum(1 for outcome in outcomes if outcome is True)

        if failures:
            self._logger.error(
                "Search history clear partially failed",
                user_id=str(owner),
                attempted=len(entry_ids),
                deleted=deleted,
                failed=len(failures),
                error=str(failures[0]),
            )
            raise failures[0]

        self._logger.info(
            "Search history cleared",
            user_id=str(owner),
            deleted=deleted,
        )

        return deleted

    async def delete_search_history_entry(self, user_id: str, entry_id: str) -> bool:
        """Delete a single entry owned by a user.

        Deleting an entry that no longer exists is a no-op.

        Raises:
            SearchHistoryNotFoundError: If the entry belongs to another user
        """
        owner = _parse_id(user_id, UserId, "user_id")
        target = _parse_id(entry_id, SearchHistoryId, "entry_id")
        repository = self._deps.search_history_repository

        entry = await repository.get_by_id(target)
        if entry is None:
            return False

        if entry.user_id != owner:
            raise SearchHistoryNotFoundError("Search history entry not found")

        deleted = await repository.delete(target)

        self._logger.info(
            "Search history entry deleted",
            user_id=str(owner),
            entry_id=str(target),
            deleted=deleted,
        )

        return deleted


__all__ = ["SearchHistoryApplicationService"]
