"""PostgreSQL repository adapters implementing the domain ports."""

from member_directory.infrastructure.persistence.repositories.profile_repository import (
    PostgresProfileRepository,
)
from member_directory.infrastructure.persistence.repositories.search_history_repository import (
    PostgresSearchHistoryRepository,
)
from member_directory.infrastructure.persistence.repositories.user_repository import (
    PostgresUserRepository,
)

__all__ = [
    "PostgresProfileRepository",
    "PostgresSearchHistoryRepository",
    "PostgresUserRepository",
]
