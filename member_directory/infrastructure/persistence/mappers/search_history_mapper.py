"""
Mapper between SearchHistoryEntry domain entities and SearchHistoryTable persistence models.

Filters round-trip through JSONB as the plain dictionary produced by
SearchFilters.to_dict().
"""

from __future__ import annotations

from member_directory.domain.entities.search_history import SearchFilters, SearchHistoryEntry
from member_directory.domain.value_objects import SearchHistoryId, UserId
from member_directory.infrastructure.persistence.models.search_history_table import SearchHistoryTable


class SearchHistoryMapper:
    """Maps between SearchHistoryEntry domain entities and SearchHistoryTable rows."""

    @staticmethod
    def to_domain(table: SearchHistoryTable) -> SearchHistoryEntry:
        """Convert SearchHistoryTable (persistence) to SearchHistoryEntry (domain entity)."""
        return SearchHistoryEntry(
            id=SearchHistoryId(table.id),
            user_id=UserId(table.user_id),
            query=table.query,
            filters=SearchFilters.from_mapping(table.filters or {}),
            timestamp=table.timestamp,
        )

    @staticmethod
    def to_table(entity: SearchHistoryEntry) -> SearchHistoryTable:
        """Convert SearchHistoryEntry (domain entity) to SearchHistoryTable (persistence)."""
        return SearchHistoryTable(
            id=entity.id.value,
            user_id=entity.user_id.value,
            query=entity.query,
            filters=entity.filters.to_dict(),
            timestamp=entity.timestamp,
        )


__all__ = ["SearchHistoryMapper"]
