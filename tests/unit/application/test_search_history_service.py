"""
Unit tests for SearchHistoryApplicationService.

This test suite covers:
- Save/get round trip and newest-first ordering
- Append-only behaviour (no deduplication)
- Clearing history, including partial delete failures
- Single entry deletion and ownership checks
- Identifier and limit validation
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from member_directory.application.dependencies.search_history_dependencies import (
    SearchHistoryDependencies,
)
from member_directory.application.search_history_service import SearchHistoryApplicationService
from member_directory.domain.entities.search_history import SearchFilters, SearchHistoryEntry
from member_directory.domain.exceptions import (
    SearchHistoryNotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from member_directory.domain.value_objects import UserId

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def history_service(history_repository):
    return SearchHistoryApplicationService(
        SearchHistoryDependencies(search_history_repository=history_repository)
    )


@pytest.fixture
def user_id() -> str:
    return str(uuid4())


def _entry(user_id: str, query: str, minutes: int) -> SearchHistoryEntry:
    return SearchHistoryEntry(
        user_id=UserId(user_id),
        query=query,
        timestamp=datetime(2024, 5, 1, 9, 0) + timedelta(minutes=minutes),
    )


# =============================================================================
# SAVE / GET
# =============================================================================


class TestSaveAndGet:
    async def test_round_trip_keeps_query_and_filters(self, history_service, user_id):
        await history_service.save_search_history(user_id, "pastor", {"category": "clergy"})

        entries = await history_service.get_search_history(user_id, 1)

        assert len(entries) == 1
        assert entries[0].query == "pastor"
        assert entries[0].filters.category == "clergy"

    async def test_saving_is_append_only(self, history_service, history_repository, user_id):
        for _ in range(3):
            await history_service.save_search_history(user_id, "pastor")

        assert history_repository.count_for(UserId(user_id)) == 3

    async def test_newest_first_with_default_limit_of_ten(
        self, history_service, history_repository, user_id
    ):
        for minute in range(15):
            await history_repository.add(_entry(user_id, f"q{minute}", minute))

        entries = await history_service.get_search_history(user_id)

        assert [entry.query for entry in entries] == [f"q{m}" for m in range(14, 4, -1)]

    async def test_other_users_are_not_visible(self, history_service, user_id):
        await history_service.save_search_history(str(uuid4()), "teacher")

        assert await history_service.get_search_history(user_id) == []

    async def test_empty_query_and_filters_are_stored_verbatim(self, history_service, user_id):
        entry = await history_service.save_search_history(user_id, "", {"location": ""})

        assert entry.query == ""
        assert entry.filters == SearchFilters(location="")

    @pytest.mark.parametrize("limit", [0, -3, True, "5"])
    async def test_invalid_limit_is_rejected(self, history_service, history_repository, user_id, limit):
        with pytest.raises(ValidationError):
            await history_service.get_search_history(user_id, limit)
        assert not any(call[0] == "list_by_user" for call in history_repository.call_log)

    async def test_malformed_user_id_is_rejected(self, history_service):
        with pytest.raises(ValidationError):
            await history_service.save_search_history("not-a-user", "pastor")

    async def test_unknown_filter_key_is_rejected_before_store_call(
        self, history_service, history_repository, user_id
    ):
        with pytest.raises(ValidationError):
            await history_service.save_search_history(user_id, "pastor", {"rank": "senior"})
        assert history_repository.call_log == []

    async def test_store_failure_on_save_propagates(self, history_service, history_repository, user_id):
        history_repository.should_fail_on_add = True

        with pytest.raises(StoreUnavailableError):
            await history_service.save_search_history(user_id, "pastor")


# =============================================================================
# CLEAR / DELETE
# =============================================================================


class TestClear:
    async def test_clear_then_get_returns_empty(self, history_service, user_id):
        for query in ("pastor", "nurse", "teacher"):
            await history_service.save_search_history(user_id, query)

        deleted = await history_service.clear_search_history(user_id)

        assert deleted == 3
        assert await history_service.get_search_history(user_id) == []

    async def test_clear_only_touches_the_given_user(self, history_service, history_repository, user_id):
        other = str(uuid4())
        await history_service.save_search_history(user_id, "pastor")
        await history_service.save_search_history(other, "nurse")

        await history_service.clear_search_history(user_id)

        assert history_repository.count_for(UserId(other)) == 1

    async def test_clear_with_no_history_is_a_no_op(self, history_service, user_id):
        assert await history_service.clear_search_history(user_id) == 0

    async def test_partial_failure_attempts_every_delete_then_raises(
        self, history_service, history_repository, user_id
    ):
        entries = [await history_service.save_search_history(user_id, f"q{i}") for i in range(4)]
        history_repository.failing_delete_ids = {entries[1].id}

        with pytest.raises(StoreUnavailableError):
            await history_service.clear_search_history(user_id)

        attempted = [call[1] for call in history_repository.call_log if call[0] == "delete"]
        assert set(attempted) == {entry.id for entry in entries}
        assert list(history_repository.entries) == [entries[1].id]

    async def test_retry_after_partial_failure_finishes_the_job(
        self, history_service, history_repository, user_id
    ):
        entry = await history_service.save_search_history(user_id, "pastor")
        history_repository.failing_delete_ids = {entry.id}
        with pytest.raises(StoreUnavailableError):
            await history_service.clear_search_history(user_id)

        history_repository.failing_delete_ids = set()
        assert await history_service.clear_search_history(user_id) == 1
        assert await history_service.get_search_history(user_id) == []


class TestDeleteEntry:
    async def test_deletes_own_entry(self, history_service, user_id):
        entry = await history_service.save_search_history(user_id, "pastor")

        assert await history_service.delete_search_history_entry(user_id, str(entry.id)) is True
        assert await history_service.get_search_history(user_id) == []

    async def test_missing_entry_is_a_no_op(self, history_service, user_id):
        assert await history_service.delete_search_history_entry(user_id, str(uuid4())) is False

    async def test_entry_of_another_user_is_not_found(self, history_service, history_repository, user_id):
        entry = await history_service.save_search_history(str(uuid4()), "pastor")

        with pytest.raises(SearchHistoryNotFoundError):
            await history_service.delete_search_history_entry(user_id, str(entry.id))
        assert entry.id in history_repository.entries

    async def test_malformed_entry_id_is_rejected(self, history_service, user_id):
        with pytest.raises(ValidationError):
            await history_service.delete_search_history_entry(user_id, "nope")
