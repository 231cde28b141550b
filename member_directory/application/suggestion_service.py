"""
Suggestion Application Service

Mines autocomplete suggestions from the text fields of approved profiles.
"""

from typing import List, Optional

import structlog

from member_directory.application.dependencies.suggestion_dependencies import (
    SuggestionDependencies,
)
from member_directory.core.config import MAX_SUGGESTIONS, MIN_SUGGESTION_QUERY_LENGTH
from member_directory.domain.entities.profile import SUGGESTION_FIELDS

logger = structlog.get_logger(__name__)


class SuggestionApplicationService:
    """
    Application service for generating search suggestions.

    Performs a full scan of approved profiles and collects field values
    containing the query as a case-insensitive substring. Ordering is the
    scan order: profile by profile, and within a profile the fields
    profession, skills, category, location. Values are deduplicated on
    their exact text and the first ``limit`` are returned.
    """

    def __init__(self, dependencies: SuggestionDependencies):
        self._deps = dependencies
        self.min_query_length = max(dependencies.min_query_length, MIN_SUGGESTION_QUERY_LENGTH)
        self.limit = max(1, min(dependencies.limit, MAX_SUGGESTIONS))

    async def get_suggestions(self, query: Optional[str]) -> List[str]:
        """
        Get autocomplete suggestions for a partial query.

        Args:
            query: Partial query text; shorter than the minimum length
                returns an empty list without touching the store

        Returns:
            Up to ``limit`` distinct field values in scan order
        """
        if not isinstance(query, str) or len(query) < self.min_query_length:
            return []

        needle = query.lower()
        profiles = await self._deps.profile_repository.scan_approved()

        suggestions: dict[str, None] = {}
        for profile in profiles:
            if not profile.is_approved:
                continue

            for field_name in SUGGESTION_FIELDS:
                value = profile.field_text(field_name)
                if value is not None and needle in value.lower():
                    suggestions.setdefault(value, None)

            if len(suggestions) >= self.limit:
                break

        result = list(suggestions)[: self.limit]

        logger.debug(
            "Suggestions generated",
            query=query,
            scanned=len(profiles),
            returned=len(result),
        )

        return result


__all__ = ["SuggestionApplicationService"]
