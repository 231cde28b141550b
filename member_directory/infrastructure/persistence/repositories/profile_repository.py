"""PostgreSQL implementation of IProfileRepository using ProfileMapper."""

from __future__ import annotations

from typing import List, Optional

import structlog
from sqlalchemy import or_
from sqlmodel import select

from member_directory.database.error_handling import store_operation
from member_directory.database.sqlmodel_engine import SQLModelDatabaseManager, get_sqlmodel_db_manager
from member_directory.domain.entities.profile import SEARCHABLE_FIELDS, Profile, ProfileStatus
from member_directory.domain.entities.search_history import SearchFilters
from member_directory.domain.repositories.profile_repository import IProfileRepository
from member_directory.domain.services.text_relevance import TextRelevanceScorer, query_terms
from member_directory.infrastructure.persistence.mappers.profile_mapper import ProfileMapper
from member_directory.infrastructure.persistence.models.profile_table import ProfileTable

logger = structlog.get_logger(__name__)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresProfileRepository(IProfileRepository):
    """PostgreSQL adapter implementation of IProfileRepository.

    Candidate rows are narrowed in SQL (approval, equality filters and a
    substring prefilter per query term); relevance ranking is delegated to
    the domain TextRelevanceScorer so every adapter ranks identically.
    """

    def __init__(
        self,
        db_manager: Optional[SQLModelDatabaseManager] = None,
        scorer: Optional[TextRelevanceScorer] = None,
    ):
        self._db_manager = db_manager
        self._scorer = scorer or TextRelevanceScorer()

    @property
    def db_manager(self) -> SQLModelDatabaseManager:
        if self._db_manager is None:
            self._db_manager = get_sqlmodel_db_manager()
        return self._db_manager

    def _base_statement(self, filters: SearchFilters):
        stmt = select(ProfileTable).where(ProfileTable.status == ProfileStatus.APPROVED.value)

        for field_name, value in filters.equality_filters().items():
            stmt = stmt.where(getattr(ProfileTable, field_name) == value)

        if filters.verified_only:
            stmt = stmt.where(
                or_(
                    ProfileTable.email_verified.is_(True),
                    ProfileTable.phone_verified.is_(True),
                    ProfileTable.pastor_endorsed.is_(True),
                    ProfileTable.background_check.is_(True),
                )
            )

        return stmt

    async def search_by_text(
        self,
        text: str,
        filters: SearchFilters,
        limit: int = 50,
    ) -> List[Profile]:
        """Run a ranked text search over approved profiles."""
        terms = query_terms(text)
        if text.strip() and not terms:
            logger.debug("Query has no searchable tokens", query=text)
            return []

        stmt = self._base_statement(filters)

        if terms:
            columns = [getattr(ProfileTable, name) for name in SEARCHABLE_FIELDS]
            stmt = stmt.where(
                or_(
                    *(
                        column.ilike(f"%{_escape_like(term)}%", escape="\\")
                        for term in terms
                        for column in columns
                    )
                )
            )
            stmt = stmt.order_by(ProfileTable.created_at, ProfileTable.id)
        else:
            # Blank query ranking is recency only, which this ORDER BY reproduces.
            stmt = stmt.order_by(
                ProfileTable.updated_at.desc(), ProfileTable.created_at, ProfileTable.id
            ).limit(limit)

        async with store_operation("profile search"):
            async with self.db_manager.get_session() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()

        candidates = [ProfileMapper.to_domain(row) for row in rows]
        ranked = self._scorer.rank(candidates, text, limit)

        logger.debug(
            "Profile text search executed",
            terms=terms,
            candidates=len(candidates),
            returned=len(ranked),
        )

        return ranked

    async def scan_approved(self) -> List[Profile]:
        """Return every approved profile in insertion order."""
        stmt = (
            select(ProfileTable)
            .where(ProfileTable.status == ProfileStatus.APPROVED.value)
            .order_by(ProfileTable.created_at, ProfileTable.id)
        )

        async with store_operation("profile scan"):
            async with self.db_manager.get_session() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()

        return [ProfileMapper.to_domain(row) for row in rows]


__all__ = ["PostgresProfileRepository"]
