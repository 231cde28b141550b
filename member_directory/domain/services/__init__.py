"""Domain services."""

from member_directory.domain.services.text_relevance import (
    TextRelevanceScorer,
    matches_filters,
    query_terms,
    tokenize,
)

__all__ = ["TextRelevanceScorer", "matches_filters", "query_terms", "tokenize"]
