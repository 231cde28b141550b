"""Pure domain representation of directory profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from member_directory.domain.value_objects import ProfileId, UserId


class ProfileStatus(str, Enum):
    """Approval status for a profile."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# Fields offered to autocomplete, in the order they are inspected.
SUGGESTION_FIELDS = ("profession", "skills", "category", "location")

# Fields that feed the text index. Skills is the primary search field.
SEARCHABLE_FIELDS = ("skills", "profession", "category", "location")


@dataclass
class VerificationBadges:
    """Badges granted by the verification workflow (read-only here)."""

    email_verified: bool = False
    phone_verified: bool = False
    pastor_endorsed: bool = False
    background_check: bool = False

    def any(self) -> bool:
        """Check if at least one badge has been granted."""
        return (
            self.email_verified
            or self.phone_verified
            or self.pastor_endorsed
            or self.background_check
        )


@dataclass
class Profile:
    """A member's professional listing in the directory."""

    id: ProfileId
    user_id: UserId
    name: str
    profession: Optional[str] = None
    skills: Optional[str] = None
    category: Optional[str] = None
    experience: Optional[str] = None
    services_offered: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    church: Optional[str] = None
    denomination: Optional[str] = None
    profile_picture: Optional[str] = None
    status: ProfileStatus = ProfileStatus.PENDING
    badges: VerificationBadges = field(default_factory=VerificationBadges)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_approved(self) -> bool:
        return self.status == ProfileStatus.APPROVED

    @property
    def is_verified(self) -> bool:
        return self.badges.any()

    def field_text(self, name: str) -> Optional[str]:
        """Return a textual field value, or None when missing or not a string."""
        value = getattr(self, name, None)
        return value if isinstance(value, str) else None


__all__ = [
    "Profile",
    "ProfileStatus",
    "VerificationBadges",
    "SUGGESTION_FIELDS",
    "SEARCHABLE_FIELDS",
]
