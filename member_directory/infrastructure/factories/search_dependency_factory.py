"""Concrete factory for creating SearchApplicationService dependencies."""

from __future__ import annotations

from member_directory.application.dependencies import ISearchDependencyFactory, SearchDependencies
from member_directory.core.config import get_settings
from member_directory.infrastructure.providers.repository_provider import (
    get_profile_repository,
    get_user_repository,
)


class SearchDependencyFactory(ISearchDependencyFactory):
    """Concrete factory for creating search dependencies using current providers."""

    async def create_dependencies(self) -> SearchDependencies:
        """Create and return search dependencies."""
        settings = get_settings()

        # Repository implementations (via providers for singleton pattern)
        profile_repository = await get_profile_repository()
        user_repository = await get_user_repository()

        return SearchDependencies(
            profile_repository=profile_repository,
            user_repository=user_repository,
            max_results=settings.SEARCH_MAX_RESULTS,
        )


# Singleton instance for global usage
_search_dependency_factory: SearchDependencyFactory | None = None


async def get_search_dependency_factory() -> SearchDependencyFactory:
    """Get singleton instance of search dependency factory."""
    global _search_dependency_factory
    if _search_dependency_factory is None:
        _search_dependency_factory = SearchDependencyFactory()
    return _search_dependency_factory


async def get_search_dependencies() -> SearchDependencies:
    """Helper function to get search dependencies directly."""
    factory = await get_search_dependency_factory()
    return await factory.create_dependencies()


__all__ = ["SearchDependencyFactory", "get_search_dependency_factory", "get_search_dependencies"]
