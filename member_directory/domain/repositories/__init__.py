"""Domain repository abstractions."""

from .profile_repository import IProfileRepository
from .search_history_repository import ISearchHistoryRepository
from .user_repository import IUserRepository

__all__ = [
    "IProfileRepository",
    "ISearchHistoryRepository",
    "IUserRepository",
]
