"""Repository provider utilities."""

from __future__ import annotations

import asyncio

from member_directory.domain.repositories import (
    IProfileRepository,
    ISearchHistoryRepository,
    IUserRepository,
)
from member_directory.infrastructure.persistence.repositories import (
    PostgresProfileRepository,
    PostgresSearchHistoryRepository,
    PostgresUserRepository,
)

_profile_repository: IProfileRepository | None = None
_user_repository: IUserRepository | None = None
_search_history_repository: ISearchHistoryRepository | None = None

_profile_lock = asyncio.Lock()
_user_lock = asyncio.Lock()
_search_history_lock = asyncio.Lock()


async def get_profile_repository() -> IProfileRepository:
    """Return singleton profile repository adapter satisfying the domain interface."""
    global _profile_repository
    if _profile_repository is not None:
        return _profile_repository

    async with _profile_lock:
        if _profile_repository is not None:
            return _profile_repository

        _profile_repository = PostgresProfileRepository()
        return _profile_repository


async def get_user_repository() -> IUserRepository:
    """Return singleton user repository implementation."""
    global _user_repository
    if _user_repository is not None:
        return _user_repository

    async with _user_lock:
        if _user_repository is not None:
            return _user_repository

        _user_repository = PostgresUserRepository()
        return _user_repository


async def get_search_history_repository() -> ISearchHistoryRepository:
    """Return singleton search history repository implementation."""
    global _search_history_repository
    if _search_history_repository is not None:
        return _search_history_repository

    async with _search_history_lock:
        if _search_history_repository is not None:
            return _search_history_repository

        _search_history_repository = PostgresSearchHistoryRepository()
        return _search_history_repository


def reset_repositories() -> None:
    """Drop cached repository singletons."""
    global _profile_repository, _user_repository, _search_history_repository
    _profile_repository = None
    _user_repository = None
    _search_history_repository = None


__all__ = [
    "get_profile_repository",
    "get_user_repository",
    "get_search_history_repository",
    "reset_repositories",
]
