"""
SQLModel SearchHistory table definition with JSONB storage for filters.

Rows are inserted and deleted, never updated.
"""

from datetime import datetime
from typing import Any, Dict
from uuid import UUID

from sqlalchemy import Column, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from member_directory.infrastructure.persistence.models.base import (
    create_id_column,
    create_timestamp_column,
    create_user_id_column,
)


class SearchHistoryTable(SQLModel, table=True):
    """One executed directory search."""

    __tablename__ = "search_history"

    __table_args__ = (
        Index("idx_search_history_user_timestamp", "user_id", "timestamp"),
    )

    id: UUID = Field(sa_column=create_id_column(), description="Search history identifier")
    user_id: UUID = Field(sa_column=create_user_id_column(), description="User who searched")

    query: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Literal query text"
    )
    filters: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default=dict),
        description="Filters applied, stored verbatim"
    )
    timestamp: datetime = Field(
        sa_column=create_timestamp_column(index=True),
        description="When the search was executed"
    )


__all__ = ["SearchHistoryTable"]
