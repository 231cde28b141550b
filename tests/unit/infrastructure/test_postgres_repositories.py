"""
Unit tests for the PostgreSQL repository adapters.

The database manager is replaced by a fake whose session records the
statements it receives, so the tests check the generated SQL and the
adapter-side ranking without a running database.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from member_directory.domain.entities.search_history import SearchFilters, SearchHistoryEntry
from member_directory.domain.exceptions import StoreUnavailableError
from member_directory.domain.value_objects import SearchHistoryId, UserId
from member_directory.infrastructure.persistence.models import ProfileTable, SearchHistoryTable
from member_directory.infrastructure.persistence.repositories import (
    PostgresProfileRepository,
    PostgresSearchHistoryRepository,
    PostgresUserRepository,
)

# =============================================================================
# FIXTURES
# =============================================================================


class FakeDatabaseManager:
    def __init__(self):
        self.session = MagicMock()
        self.session.execute = AsyncMock()
        self.session.get = AsyncMock(return_value=None)
        self.session.add = MagicMock()

    def returns_rows(self, rows):
        result = MagicMock()
        result.scalars.return_value.all.return_value = rows
        self.session.execute.return_value = result

    @property
    def statement(self):
        stmt = self.session.execute.await_args.args[0]
        return str(stmt.compile(dialect=postgresql.dialect()))

    @asynccontextmanager
    async def get_session(self):
        yield self.session


@pytest.fixture
def db_manager():
    return FakeDatabaseManager()


def _profile_row(profession: str, minutes: int, **overrides) -> ProfileTable:
    values = {
        "id": uuid4(),
        "user_id": uuid4(),
        "name": "Member",
        "profession": profession,
        "status": "approved",
        "created_at": datetime(2024, 1, 1) + timedelta(minutes=minutes),
        "updated_at": datetime(2024, 1, 1) + timedelta(minutes=minutes),
    }
    values.update(overrides)
    return ProfileTable(**values)


# =============================================================================
# PROFILES
# =============================================================================


class TestPostgresProfileRepository:
    async def test_query_restricts_to_approved_and_filters(self, db_manager):
        db_manager.returns_rows([])
        repository = PostgresProfileRepository(db_manager)

        await repository.search_by_text(
            "nurse", SearchFilters(category="health", country="Ghana", verified_only=True)
        )

        sql = db_manager.statement
        assert "profiles.status = " in sql
        assert "profiles.category = " in sql
        assert "profiles.country = " in sql
        assert "profiles.location = " not in sql
        assert "ILIKE" in sql.upper()
        assert "profiles.email_verified IS true" in sql

    async def test_blank_query_orders_and_limits_in_sql(self, db_manager):
        db_manager.returns_rows([])
        repository = PostgresProfileRepository(db_manager)

        await repository.search_by_text("", SearchFilters(), limit=50)

        sql = db_manager.statement
        assert "ILIKE" not in sql.upper()
        assert "ORDER BY profiles.updated_at DESC" in sql
        assert "LIMIT" in sql

    async def test_query_without_word_tokens_skips_the_store(self, db_manager):
        repository = PostgresProfileRepository(db_manager)

        assert await repository.search_by_text("!!!", SearchFilters()) == []
        db_manager.session.execute.assert_not_awaited()

    async def test_candidates_are_ranked_in_process(self, db_manager):
        substring_only = _profile_row("Steward", 0)
        older = _profile_row("Ward Nurse", 1)
        newer = _profile_row("Ward Manager", 2)
        db_manager.returns_rows([substring_only, older, newer])
        repository = PostgresProfileRepository(db_manager)

        results = await repository.search_by_text("ward", SearchFilters())

        assert [profile.id.value for profile in results] == [newer.id, older.id]

    async def test_connection_failure_is_translated(self, db_manager):
        db_manager.session.execute.side_effect = OperationalError("SELECT", {}, OSError("down"))
        repository = PostgresProfileRepository(db_manager)

        with pytest.raises(StoreUnavailableError):
            await repository.scan_approved()

    async def test_scan_returns_mapped_profiles(self, db_manager):
        rows = [_profile_row("Nurse", 0), _profile_row("Teacher", 1)]
        db_manager.returns_rows(rows)

        profiles = await PostgresProfileRepository(db_manager).scan_approved()

        assert [profile.profession for profile in profiles] == ["Nurse", "Teacher"]
        assert "ORDER BY profiles.created_at" in db_manager.statement


# =============================================================================
# USERS / HISTORY
# =============================================================================


class TestPostgresUserRepository:
    async def test_missing_user_returns_none(self, db_manager):
        assert await PostgresUserRepository(db_manager).get_by_id(UserId(uuid4())) is None


class TestPostgresSearchHistoryRepository:
    async def test_add_persists_mapped_row(self, db_manager):
        entry = SearchHistoryEntry.record(UserId(uuid4()), "pastor", SearchFilters(category="clergy"))

        stored = await PostgresSearchHistoryRepository(db_manager).add(entry)

        assert stored is entry
        row = db_manager.session.add.call_args.args[0]
        assert isinstance(row, SearchHistoryTable)
        assert row.filters == {"category": "clergy"}

    async def test_list_orders_newest_first_with_limit(self, db_manager):
        db_manager.returns_rows([])

        await PostgresSearchHistoryRepository(db_manager).list_by_user(UserId(uuid4()), 10)

        sql = db_manager.statement
        assert "ORDER BY search_history.timestamp DESC" in sql
        assert "LIMIT" in sql

    async def test_delete_reports_whether_a_row_was_removed(self, db_manager):
        result = MagicMock()
        result.rowcount = 0
        db_manager.session.execute.return_value = result

        deleted = await PostgresSearchHistoryRepository(db_manager).delete(SearchHistoryId(uuid4()))

        assert deleted is False
