"""Domain repository contract for directory profiles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from member_directory.domain.entities.profile import Profile
from member_directory.domain.entities.search_history import SearchFilters


class IProfileRepository(ABC):
    """Read-side access to the profile store used by the search layer.

    Every method returns approved profiles only; the approval constraint is
    applied at query time, never by excluding records from storage.
    """

    @abstractmethod
    async def search_by_text(
        self,
        text: str,
        filters: SearchFilters,
        limit: int = 50,
    ) -> List[Profile]:
        """Run a ranked text search over approved profiles.

        Equality filters are AND-combined with the approval constraint.
        Results are ordered by relevance and capped at ``limit``.
        """
        raise NotImplementedError

    @abstractmethod
    async def scan_approved(self) -> List[Profile]:
        """Return every approved profile in the store's natural order (unindexed)."""
        raise NotImplementedError
