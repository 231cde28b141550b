"""Dependencies interface for SearchApplicationService."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from member_directory.core.config import MAX_SEARCH_RESULTS
from member_directory.domain.repositories.profile_repository import IProfileRepository
from member_directory.domain.repositories.user_repository import IUserRepository


@dataclass
class SearchDependencies:
    """Dependencies required by SearchApplicationService."""

    # Repositories (domain layer)
    profile_repository: IProfileRepository
    user_repository: IUserRepository

    # Configuration
    max_results: int = MAX_SEARCH_RESULTS


class ISearchDependencyFactory(ABC):
    """Abstract factory for creating search dependencies."""

    @abstractmethod
    async def create_dependencies(self) -> SearchDependencies:
        """Create and return search dependencies."""
        pass


__all__ = ["ISearchDependencyFactory", "SearchDependencies"]
