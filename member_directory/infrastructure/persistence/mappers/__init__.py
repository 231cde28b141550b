"""
Mappers for converting between domain entities and persistence models.

Each mapper handles bidirectional conversion between pure domain entities
and SQLModel persistence models, following hexagonal architecture principles.
"""

from member_directory.infrastructure.persistence.mappers.profile_mapper import ProfileMapper
from member_directory.infrastructure.persistence.mappers.search_history_mapper import (
    SearchHistoryMapper,
)
from member_directory.infrastructure.persistence.mappers.user_mapper import UserMapper

__all__ = [
    "ProfileMapper",
    "SearchHistoryMapper",
    "UserMapper",
]
