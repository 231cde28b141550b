"""SQLModel table definitions."""

from member_directory.infrastructure.persistence.models.profile_table import ProfileTable
from member_directory.infrastructure.persistence.models.search_history_table import SearchHistoryTable
from member_directory.infrastructure.persistence.models.user_table import UserTable

__all__ = ["ProfileTable", "SearchHistoryTable", "UserTable"]
