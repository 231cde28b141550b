"""Unit tests for ResultHydrator."""

import asyncio
from unittest.mock import AsyncMock, Mock

from member_directory.application.result_hydrator import ResultHydrator
from member_directory.domain.repositories.user_repository import IUserRepository
from tests.mocks.memory_repositories import InMemoryUserRepository


class StaggeredUserRepository(InMemoryUserRepository):
    """Earlier requests finish later, so completions arrive out of order."""

    def __init__(self, users):
        super().__init__(users)
        self._pending = len(users)

    async def get_by_id(self, user_id):
        self._pending -= 1
        await asyncio.sleep(0.001 * self._pending)
        return await super().get_by_id(user_id)


class TestResultHydrator:
    async def test_empty_input_makes_no_lookups(self, user_repository):
        assert await ResultHydrator(user_repository).hydrate([]) == []
        assert user_repository.call_log == []

    async def test_order_is_preserved_when_lookups_finish_out_of_order(self, make_user, make_profile):
        users = [make_user(f"User {i}") for i in range(5)]
        profiles = [make_profile(user) for user in users]

        hydrated = await ResultHydrator(StaggeredUserRepository(users)).hydrate(profiles)

        assert [item.profile for item in hydrated] == profiles
        assert [item.user for item in hydrated] == users

    async def test_missing_user_yields_none_for_that_entry_only(
        self, make_user, make_profile, user_repository
    ):
        present = make_user("Present")
        user_repository.add(present)
        orphan = make_profile()
        owned = make_profile(present)

        hydrated = await ResultHydrator(user_repository).hydrate([orphan, owned])

        assert hydrated[0].user is None
        assert hydrated[1].user is present

    async def test_failed_lookup_degrades_to_none(self, make_user, make_profile, user_repository):
        healthy, broken = make_user("Healthy"), make_user("Broken")
        user_repository.add(healthy, broken)
        user_repository.failing_ids = {broken.id}

        hydrated = await ResultHydrator(user_repository).hydrate(
            [make_profile(broken), make_profile(healthy)]
        )

        assert hydrated[0].user is None
        assert hydrated[1].user is healthy

    async def test_mismatched_user_is_never_attached(self, make_user, make_profile):
        stranger = make_user("Stranger")
        repository = Mock(spec=IUserRepository)
        repository.get_by_id = AsyncMock(return_value=stranger)

        hydrated = await ResultHydrator(repository).hydrate([make_profile(make_user("Owner"))])

        assert hydrated[0].user is None
