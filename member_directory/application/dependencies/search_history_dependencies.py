"""Dependency container for search history application service."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from member_directory.domain.repositories.search_history_repository import ISearchHistoryRepository


@dataclass
class SearchHistoryDependencies:
    """Container for search history service dependencies."""

    search_history_repository: ISearchHistoryRepository
    default_limit: int = 10


class ISearchHistoryDependencyFactory(ABC):
    """Abstract factory for creating search history dependencies."""

    @abstractmethod
    async def create_dependencies(self) -> SearchHistoryDependencies:
        """Create and return search history dependencies."""
        pass


__all__ = ["ISearchHistoryDependencyFactory", "SearchHistoryDependencies"]
