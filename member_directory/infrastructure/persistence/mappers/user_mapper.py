"""Mapper between User domain entities and UserTable persistence models."""

from __future__ import annotations

from member_directory.domain.entities.user import ChurchAffiliation, User, UserRole
from member_directory.domain.value_objects import UserId
from member_directory.infrastructure.persistence.models.user_table import UserTable


class UserMapper:
    """Maps between User domain entities and UserTable persistence models."""

    @staticmethod
    def to_domain(table: UserTable) -> User:
        """Convert UserTable (persistence) to User (domain entity)."""
        return User(
            id=UserId(table.id),
            name=table.name,
            email=table.email,
            phone=table.phone,
            role=UserRole(table.role),
            is_online=bool(table.is_online),
            last_seen=table.last_seen,
            affiliation=ChurchAffiliation(
                denomination=table.denomination,
                denomination_name=table.denomination_name,
                branch=table.branch,
                branch_name=table.branch_name,
                branch_location=table.branch_location,
                pastor=table.pastor,
                pastor_email=table.pastor_email,
            ),
            account_approved=bool(table.account_approved),
            created_at=table.created_at,
        )

    @staticmethod
    def to_table(entity: User) -> UserTable:
        """Convert User (domain entity) to UserTable (persistence)."""
        affiliation = entity.affiliation
        return UserTable(
            id=entity.id.value,
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            role=entity.role.value,
            is_online=entity.is_online,
            last_seen=entity.last_seen,
            denomination=affiliation.denomination,
            denomination_name=affiliation.denomination_name,
            branch=affiliation.branch,
            branch_name=affiliation.branch_name,
            branch_location=affiliation.branch_location,
            pastor=affiliation.pastor,
            pastor_email=affiliation.pastor_email,
            account_approved=entity.account_approved,
            created_at=entity.created_at,
        )


__all__ = ["UserMapper"]
