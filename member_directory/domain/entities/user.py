"""Pure domain representation of directory members.

User records are owned by the account workflows; the search layer only
reads them to hydrate results for display.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from member_directory.domain.value_objects import UserId


class UserRole(str, Enum):
    """Roles a member account can hold."""

    ADMIN = "admin"
    MEMBER = "member"


@dataclass
class ChurchAffiliation:
    """Denomination and branch the member belongs to."""

    denomination: Optional[str] = None
    denomination_name: Optional[str] = None
    branch: Optional[str] = None
    branch_name: Optional[str] = None
    branch_location: Optional[str] = None
    pastor: Optional[str] = None
    pastor_email: Optional[str] = None


@dataclass
class User:
    """Identity and contact details of a member."""

    id: UserId
    name: str
    email: str
    phone: Optional[str] = None
    role: UserRole = UserRole.MEMBER
    is_online: bool = False
    last_seen: Optional[datetime] = None
    affiliation: ChurchAffiliation = field(default_factory=ChurchAffiliation)
    account_approved: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


__all__ = ["User", "UserRole", "ChurchAffiliation"]
