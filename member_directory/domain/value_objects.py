"""Domain value objects used across aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID


def _coerce_uuid(value: Any, *, field_name: str) -> UUID:
    """Convert strings to UUID instances while validating type."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        return UUID(value)
    raise TypeError(f"{field_name} must be a UUID-compatible value")


@dataclass(frozen=True)
class UserId:
    """Aggregate identifier for User records."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="user_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ProfileId:
    """Aggregate identifier for Profile records."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="profile_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SearchHistoryId:
    """Identifier for a single search history entry."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="search_history_id"))

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["UserId", "ProfileId", "SearchHistoryId"]
