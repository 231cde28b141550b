"""Dependency container for the suggestion application service."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from member_directory.core.config import MAX_SUGGESTIONS, MIN_SUGGESTION_QUERY_LENGTH
from member_directory.domain.repositories.profile_repository import IProfileRepository


@dataclass
class SuggestionDependencies:
    """Container for suggestion service dependencies."""

    profile_repository: IProfileRepository
    limit: int = MAX_SUGGESTIONS
    min_query_length: int = MIN_SUGGESTION_QUERY_LENGTH


class ISuggestionDependencyFactory(ABC):
    """Abstract factory for creating suggestion dependencies."""

    @abstractmethod
    async def create_dependencies(self) -> SuggestionDependencies:
        """Create and return suggestion dependencies."""
        pass


__all__ = ["ISuggestionDependencyFactory", "SuggestionDependencies"]
