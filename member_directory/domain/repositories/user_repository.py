"""Domain repository interface for User records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from member_directory.domain.entities.user import User
from member_directory.domain.value_objects import UserId


class IUserRepository(ABC):
    """Read-only user lookups used to hydrate search results."""

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get a user by ID, or None when the user no longer exists."""
        raise NotImplementedError
