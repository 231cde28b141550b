"""Join matched profiles to their owning users for display."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import List, Optional, Sequence

import structlog

from member_directory.domain.entities.profile import Profile
from member_directory.domain.entities.user import User
from member_directory.domain.repositories.user_repository import IUserRepository

logger = structlog.get_logger(__name__)


@dataclass
class HydratedProfile:
    """A profile merged with its resolved owner (None if the user is gone)."""

    profile: Profile
    user: Optional[User]


class ResultHydrator:
    """Resolve owning users for a batch of profiles.

    Lookups are dispatched concurrently and gathered before returning. A
    missing user or a failed lookup degrades to ``user=None`` for that entry
    only; output order always equals input order.
    """

    def __init__(self, user_repository: IUserRepository) -> None:
        self._users = user_repository

    async def hydrate(self, profiles: Sequence[Profile]) -> List[HydratedProfile]:
        if not profiles:
            return []

        lookups = await asyncio.gather(
            *(self._users.get_by_id(profile.user_id) for profile in profiles),
            return_exceptions=True,
        )

        hydrated: List[HydratedProfile] = []
        for profile, result in zip(profiles, lookups):
            user = self._resolve(profile, result)
            hydrated.append(HydratedProfile(profile=profile, user=user))

        return hydrated

    @staticmethod
    def _resolve(profile: Profile, result: object) -> Optional[User]:
        if isinstance(result, BaseException):
            logger.warning(
                "User lookup failed during hydration",
                profile_id=str(profile.id),
                user_id=str(profile.user_id),
                error=str(result),
            )
            return None

        if result is None:
            logger.warning(
                "Profile owner not found during hydration",
                profile_id=str(profile.id),
                user_id=str(profile.user_id),
            )
            return None

        # Guard against a store returning a different record than requested.
        if result.id != profile.user_id:
            logger.warning(
                "User lookup returned mismatched record",
                profile_id=str(profile.id),
                expected_user_id=str(profile.user_id),
                returned_user_id=str(result.id),
            )
            return None

        return result


__all__ = ["HydratedProfile", "ResultHydrator"]
