"""Domain entities for the member directory."""

from member_directory.domain.entities.profile import (
    Profile,
    ProfileStatus,
    VerificationBadges,
)
from member_directory.domain.entities.search_history import SearchFilters, SearchHistoryEntry
from member_directory.domain.entities.user import ChurchAffiliation, User, UserRole

__all__ = [
    "Profile",
    "ProfileStatus",
    "VerificationBadges",
    "SearchFilters",
    "SearchHistoryEntry",
    "User",
    "UserRole",
    "ChurchAffiliation",
]
