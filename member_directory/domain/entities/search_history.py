"""Pure domain representation of search history records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from member_directory.domain.exceptions import ValidationError
from member_directory.domain.value_objects import SearchHistoryId, UserId


@dataclass(frozen=True)
class SearchFilters:
    """Equality filters applied to a directory search.

    Stored verbatim alongside history entries. Only the shape is checked:
    known keys, string values (boolean for ``verified_only``).
    """

    category: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    verified_only: bool = False

    _STRING_KEYS = ("category", "location", "country")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "SearchFilters":
        """Build filters from a loose mapping, rejecting unknown keys and bad types."""
        if data is None:
            return cls()
        if isinstance(data, SearchFilters):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError("Search filters must be an object")

        unknown = set(data) - set(cls._STRING_KEYS) - {"verified_only"}
        if unknown:
            raise ValidationError(
                f"Unknown search filter(s): {', '.join(sorted(unknown))}"
            )

        values: Dict[str, Any] = {}
        for key in cls._STRING_KEYS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"Search filter '{key}' must be a string")
            values[key] = value

        verified_only = data.get("verified_only", False)
        if verified_only is None:
            verified_only = False
        if not isinstance(verified_only, bool):
            raise ValidationError("Search filter 'verified_only' must be a boolean")

        return cls(verified_only=verified_only, **values)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize set filters only, for storage and replay."""
        data: Dict[str, Any] = {
            key: getattr(self, key)
            for key in self._STRING_KEYS
            if getattr(self, key) is not None
        }
        if self.verified_only:
            data["verified_only"] = True
        return data

    def equality_filters(self) -> Dict[str, str]:
        """Field name to required value, for the filters that are set."""
        return {
            key: getattr(self, key)
            for key in self._STRING_KEYS
            if getattr(self, key)
        }

    def is_empty(self) -> bool:
        return not self.to_dict()


@dataclass(frozen=True)
class SearchHistoryEntry:
    """One executed search, immutable once written."""

    user_id: UserId
    query: str
    filters: SearchFilters = field(default_factory=SearchFilters)
    timestamp: datetime = field(default_factory=datetime.utcnow)
    id: SearchHistoryId = field(default_factory=lambda: SearchHistoryId(uuid4()))

    @classmethod
    def record(
        cls,
        user_id: UserId,
        query: str,
        filters: Optional[SearchFilters] = None,
    ) -> "SearchHistoryEntry":
        """Create a new entry stamped with the current time."""
        return cls(
            user_id=user_id,
            query=query,
            filters=filters or SearchFilters(),
            timestamp=datetime.utcnow(),
        )


__all__ = ["SearchFilters", "SearchHistoryEntry"]
