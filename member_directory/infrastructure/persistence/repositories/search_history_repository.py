"""PostgreSQL implementation of ISearchHistoryRepository using SearchHistoryMapper."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, desc
from sqlmodel import select

from member_directory.database.error_handling import store_operation
from member_directory.database.sqlmodel_engine import SQLModelDatabaseManager, get_sqlmodel_db_manager
from member_directory.domain.entities.search_history import SearchHistoryEntry
from member_directory.domain.repositories.search_history_repository import ISearchHistoryRepository
from member_directory.domain.value_objects import SearchHistoryId, UserId
from member_directory.infrastructure.persistence.mappers.search_history_mapper import SearchHistoryMapper
from member_directory.infrastructure.persistence.models.search_history_table import SearchHistoryTable


class PostgresSearchHistoryRepository(ISearchHistoryRepository):
    """PostgreSQL adapter implementation of ISearchHistoryRepository."""

    def __init__(self, db_manager: Optional[SQLModelDatabaseManager] = None):
        self._db_manager = db_manager

    @property
    def db_manager(self) -> SQLModelDatabaseManager:
        if self._db_manager is None:
            self._db_manager = get_sqlmodel_db_manager()
        return self._db_manager

    async def add(self, entry: SearchHistoryEntry) -> SearchHistoryEntry:
        """Insert a search history row."""
        async with store_operation("search history insert"):
            async with self.db_manager.get_session() as session:
                session.add(SearchHistoryMapper.to_table(entry))
        return entry

    async def get_by_id(self, entry_id: SearchHistoryId) -> Optional[SearchHistoryEntry]:
        """Load a search history entry by identifier."""
        async with store_operation("search history lookup"):
            async with self.db_manager.get_session() as session:
                row = await session.get(SearchHistoryTable, entry_id.value)
                if row is None:
                    return None
                return SearchHistoryMapper.to_domain(row)

    async def list_by_user(self, user_id: UserId, limit: int) -> List[SearchHistoryEntry]:
        """List the newest entries for a user."""
        stmt = (
            select(SearchHistoryTable)
            .where(SearchHistoryTable.user_id == user_id.value)
            .order_by(desc(SearchHistoryTable.timestamp))
            .limit(limit)
        )

        async with store_operation("search history list"):
            async with self.db_manager.get_session() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()

        return [SearchHistoryMapper.to_domain(row) for row in rows]

    async def list_ids_by_user(self, user_id: UserId) -> List[SearchHistoryId]:
        """List identifiers of every entry owned by a user."""
        stmt = select(SearchHistoryTable.id).where(SearchHistoryTable.user_id == user_id.value)

        async with store_operation("search history id list"):
            async with self.db_manager.get_session() as session:
                result = await session.execute(stmt)
                ids = result.scalars().all()

        return [SearchHistoryId(value) for value in ids]

    async def delete(self, entry_id: SearchHistoryId) -> bool:
        """Delete one entry; missing entries are a no-op."""
        stmt = delete(SearchHistoryTable).where(SearchHistoryTable.id == entry_id.value)

        async with store_operation("search history delete"):
            async with self.db_manager.get_session() as session:
                result = await session.execute(stmt)

        return bool(result.rowcount)


__all__ = ["PostgresSearchHistoryRepository"]
