"""Factory for search history dependencies."""

from __future__ import annotations

from member_directory.application.dependencies import (
    ISearchHistoryDependencyFactory,
    SearchHistoryDependencies,
)
from member_directory.core.config import get_settings
from member_directory.infrastructure.providers.repository_provider import (
    get_search_history_repository,
)


class SearchHistoryDependencyFactory(ISearchHistoryDependencyFactory):
    async def create_dependencies(self) -> SearchHistoryDependencies:
        settings = get_settings()
        return SearchHistoryDependencies(
            search_history_repository=await get_search_history_repository(),
            default_limit=settings.SEARCH_HISTORY_DEFAULT_LIMIT,
        )


_search_history_dependency_factory: SearchHistoryDependencyFactory | None = None


async def get_search_history_dependency_factory() -> SearchHistoryDependencyFactory:
    global _search_history_dependency_factory
    if _search_history_dependency_factory is None:
        _search_history_dependency_factory = SearchHistoryDependencyFactory()
    return _search_history_dependency_factory


async def get_search_history_dependencies() -> SearchHistoryDependencies:
    factory = await get_search_history_dependency_factory()
    return await factory.create_dependencies()


__all__ = [
    "SearchHistoryDependencyFactory",
    "get_search_history_dependency_factory",
    "get_search_history_dependencies",
]
