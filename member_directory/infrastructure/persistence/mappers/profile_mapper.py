"""
Mapper between Profile domain entities and ProfileTable persistence models.

Handles value object conversions (ProfileId, UserId), the status enum and
the flattening of verification badges into boolean columns.
"""

from __future__ import annotations

from member_directory.domain.entities.profile import Profile, ProfileStatus, VerificationBadges
from member_directory.domain.value_objects import ProfileId, UserId
from member_directory.infrastructure.persistence.models.profile_table import ProfileTable


class ProfileMapper:
    """Maps between Profile domain entities and ProfileTable persistence models."""

    @staticmethod
    def to_domain(table: ProfileTable) -> Profile:
        """
        Convert ProfileTable (persistence) to Profile (domain entity).

        Raises:
            ValueError: If the stored status is not a known ProfileStatus
        """
        return Profile(
            id=ProfileId(table.id),
            user_id=UserId(table.user_id),
            name=table.name,
            profession=table.profession,
            skills=table.skills,
            category=table.category,
            experience=table.experience,
            services_offered=table.services_offered,
            location=table.location,
            country=table.country,
            church=table.church,
            denomination=table.denomination,
            profile_picture=table.profile_picture,
            status=ProfileStatus(table.status),
            badges=VerificationBadges(
                email_verified=bool(table.email_verified),
                phone_verified=bool(table.phone_verified),
                pastor_endorsed=bool(table.pastor_endorsed),
                background_check=bool(table.background_check),
            ),
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: Profile) -> ProfileTable:
        """Convert Profile (domain entity) to ProfileTable (persistence)."""
        return ProfileTable(
            id=entity.id.value,
            user_id=entity.user_id.value,
            name=entity.name,
            profession=entity.profession,
            skills=entity.skills,
            category=entity.category,
            experience=entity.experience,
            services_offered=entity.services_offered,
            location=entity.location,
            country=entity.country,
            church=entity.church,
            denomination=entity.denomination,
            profile_picture=entity.profile_picture,
            status=entity.status.value,
            email_verified=entity.badges.email_verified,
            phone_verified=entity.badges.phone_verified,
            pastor_endorsed=entity.badges.pastor_endorsed,
            background_check=entity.badges.background_check,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


__all__ = ["ProfileMapper"]
