"""PostgreSQL implementation of IUserRepository using UserMapper."""

from __future__ import annotations

from typing import Optional

from member_directory.database.error_handling import store_operation
from member_directory.database.sqlmodel_engine import SQLModelDatabaseManager, get_sqlmodel_db_manager
from member_directory.domain.entities.user import User
from member_directory.domain.repositories.user_repository import IUserRepository
from member_directory.domain.value_objects import UserId
from member_directory.infrastructure.persistence.mappers.user_mapper import UserMapper
from member_directory.infrastructure.persistence.models.user_table import UserTable


class PostgresUserRepository(IUserRepository):
    """PostgreSQL adapter implementation of IUserRepository."""

    def __init__(self, db_manager: Optional[SQLModelDatabaseManager] = None):
        self._db_manager = db_manager

    @property
    def db_manager(self) -> SQLModelDatabaseManager:
        if self._db_manager is None:
            self._db_manager = get_sqlmodel_db_manager()
        return self._db_manager

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get a user by ID."""
        async with store_operation("user lookup"):
            async with self.db_manager.get_session() as session:
                row = await session.get(UserTable, user_id.value)
                if row is None:
                    return None
                return UserMapper.to_domain(row)


__all__ = ["PostgresUserRepository"]
