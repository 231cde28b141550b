"""Domain service for ranking directory profiles against a free-text query.

Matching is token based: the query and the indexed profile fields are
lower-cased and split into word tokens. A query token matches when it is a
prefix of any indexed token, so ``"nurs"`` matches ``"Nursing"``.

Ranking:
1. relevance score, descending: one point per distinct query token matched,
   plus a half-point bonus when the token is matched in ``skills``
2. ``updated_at``, descending (most recently updated first)
3. store order (the sort is stable)

A blank query matches every profile with score zero, so ordering falls
back to recency. A non-blank query with no word tokens (``"!!!"``) matches
nothing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from member_directory.domain.entities.profile import SEARCHABLE_FIELDS, Profile
from member_directory.domain.entities.search_history import SearchFilters

_TOKEN_RE = re.compile(r"\w+", re.UNICODE)

PRIMARY_FIELD = "skills"
PRIMARY_FIELD_BONUS = 0.5


def tokenize(text: str | None) -> List[str]:
    """Split text into lower-cased word tokens."""
    if not text:
        return []
    return _TOKEN_RE.findall(text.lower())


def query_terms(query: str | None) -> List[str]:
    """Distinct query tokens in first-seen order."""
    return list(dict.fromkeys(tokenize(query)))


def matches_filters(profile: Profile, filters: SearchFilters) -> bool:
    """Approval constraint AND exact equality filters AND the badge filter."""
    if not profile.is_approved:
        return False
    for field_name, required in filters.equality_filters().items():
        if getattr(profile, field_name, None) != required:
            return False
    if filters.verified_only and not profile.is_verified:
        return False
    return True


@dataclass(frozen=True)
class ScoredProfile:
    """A profile paired with its relevance score."""

    profile: Profile
    score: float


class TextRelevanceScorer:
    """Score and rank profiles for a query."""

    def __init__(self, fields: Sequence[str] = SEARCHABLE_FIELDS) -> None:
        self._fields = tuple(fields)

    def _field_tokens(self, profile: Profile) -> Dict[str, List[str]]:
        return {name: tokenize(profile.field_text(name)) for name in self._fields}

    def score(self, profile: Profile, terms: Sequence[str]) -> float:
        """Relevance of a profile for pre-tokenized query terms (0.0 means no match)."""
        if not terms:
            return 0.0

        tokens_by_field = self._field_tokens(profile)
        total = 0.0
        for term in terms:
            matched_fields = [
                name
                for name, tokens in tokens_by_field.items()
                if any(token.startswith(term) for token in tokens)
            ]
            if not matched_fields:
                continue
            total += 1.0
            if PRIMARY_FIELD in matched_fields:
                total += PRIMARY_FIELD_BONUS
        return total

    def rank(
        self,
        profiles: Iterable[Profile],
        query: str | None,
        limit: int,
    ) -> List[Profile]:
        """Return matching profiles ordered by relevance, then recency, capped at ``limit``."""
        terms = query_terms(query)
        if query and query.strip() and not terms:
            return []

        scored: List[ScoredProfile] = []
        for profile in profiles:
            value = self.score(profile, terms)
            if terms and value <= 0.0:
                continue
            scored.append(ScoredProfile(profile=profile, score=value))

        # Two stable passes: recency first, then score, keeps store order for full ties.
        scored.sort(key=lambda item: item.profile.updated_at, reverse=True)
        scored.sort(key=lambda item: item.score, reverse=True)

        return [item.profile for item in scored[: max(limit, 0)]]


__all__ = [
    "TextRelevanceScorer",
    "ScoredProfile",
    "matches_filters",
    "query_terms",
    "tokenize",
]
