"""Shared pytest fixtures: entity builders, in-memory stores and provider resets."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from datetime import datetime, timedelta
from typing import Callable
from uuid import uuid4

import pytest

from member_directory.core.config import get_settings
from member_directory.domain.entities.profile import Profile, ProfileStatus, VerificationBadges
from member_directory.domain.entities.user import ChurchAffiliation, User
from member_directory.domain.value_objects import ProfileId, UserId
from member_directory.infrastructure.providers.repository_provider import reset_repositories
from tests.mocks.memory_repositories import (
    InMemoryProfileRepository,
    InMemorySearchHistoryRepository,
    InMemoryUserRepository,
)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def reset_provider_state() -> Iterator[None]:
    """Start from clean provider singletons and settings (opt in with usefixtures)."""
    reset_repositories()
    get_settings.cache_clear()
    yield
    reset_repositories()
    get_settings.cache_clear()


@pytest.fixture
def make_user() -> Callable[..., User]:
    def _make(name: str = "Grace Member", **overrides) -> User:
        values = {
            "id": UserId(uuid4()),
            "name": name,
            "email": f"{name.lower().replace(' ', '.')}@example.org",
            "affiliation": ChurchAffiliation(denomination="Baptist", branch_name="Central"),
        }
        values.update(overrides)
        return User(**values)

    return _make


@pytest.fixture
def make_profile() -> Callable[..., Profile]:
    """Build approved profiles; each call is one minute newer than the last unless overridden."""
    counter = itertools.count()

    def _make(user: User | None = None, **overrides) -> Profile:
        tick = next(counter)
        status = overrides.pop("status", ProfileStatus.APPROVED)
        values = {
            "id": ProfileId(uuid4()),
            "user_id": user.id if user else UserId(uuid4()),
            "name": user.name if user else f"Member {tick}",
            "status": status,
            "badges": VerificationBadges(),
            "created_at": BASE_TIME + timedelta(minutes=tick),
            "updated_at": BASE_TIME + timedelta(minutes=tick),
        }
        values.update(overrides)
        return Profile(**values)

    return _make


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def history_repository() -> InMemorySearchHistoryRepository:
    return InMemorySearchHistoryRepository()
