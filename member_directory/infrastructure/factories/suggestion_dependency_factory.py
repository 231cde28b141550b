"""Concrete factory for creating SuggestionApplicationService dependencies."""

from __future__ import annotations

from member_directory.application.dependencies import (
    ISuggestionDependencyFactory,
    SuggestionDependencies,
)
from member_directory.core.config import get_settings
from member_directory.infrastructure.providers.repository_provider import get_profile_repository


class SuggestionDependencyFactory(ISuggestionDependencyFactory):
    """Builds suggestion dependencies from the configured providers."""

    async def create_dependencies(self) -> SuggestionDependencies:
        settings = get_settings()
        return SuggestionDependencies(
            profile_repository=await get_profile_repository(),
            limit=settings.SUGGESTION_LIMIT,
            min_query_length=settings.SUGGESTION_MIN_QUERY_LENGTH,
        )


_suggestion_dependency_factory: SuggestionDependencyFactory | None = None


async def get_suggestion_dependency_factory() -> SuggestionDependencyFactory:
    """Get singleton instance of suggestion dependency factory."""
    global _suggestion_dependency_factory
    if _suggestion_dependency_factory is None:
        _suggestion_dependency_factory = SuggestionDependencyFactory()
    return _suggestion_dependency_factory


async def get_suggestion_dependencies() -> SuggestionDependencies:
    factory = await get_suggestion_dependency_factory()
    return await factory.create_dependencies()


__all__ = [
    "SuggestionDependencyFactory",
    "get_suggestion_dependency_factory",
    "get_suggestion_dependencies",
]
