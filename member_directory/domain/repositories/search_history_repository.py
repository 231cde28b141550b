"""Domain repository contracts for search history entries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from member_directory.domain.entities.search_history import SearchHistoryEntry
from member_directory.domain.value_objects import SearchHistoryId, UserId


class ISearchHistoryRepository(ABC):
    """Domain-facing abstraction for search history persistence operations.

    Entries are immutable: there is no update operation.
    """

    @abstractmethod
    async def add(self, entry: SearchHistoryEntry) -> SearchHistoryEntry:
        """Insert a new search history entry."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, entry_id: SearchHistoryId) -> Optional[SearchHistoryEntry]:
        """Load a single entry by identifier."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_user(self, user_id: UserId, limit: int) -> List[SearchHistoryEntry]:
        """List up to ``limit`` entries for a user, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def list_ids_by_user(self, user_id: UserId) -> List[SearchHistoryId]:
        """List the identifiers of every entry owned by a user."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, entry_id: SearchHistoryId) -> bool:
        """Delete one entry. Deleting a missing entry is a no-op returning False."""
        raise NotImplementedError


__all__ = ["ISearchHistoryRepository"]
