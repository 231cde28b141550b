"""Shared column helpers for SQLModel table definitions."""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID


def create_id_column() -> Column:
    """Primary key column holding a UUID."""
    return Column(PostgreSQLUUID(as_uuid=True), primary_key=True, nullable=False)


def create_user_id_column() -> Column:
    """Indexed owner reference (no foreign key: users may disappear)."""
    return Column(PostgreSQLUUID(as_uuid=True), nullable=False, index=True)


def create_timestamp_column(*, index: bool = False, onupdate: bool = False) -> Column:
    """Naive UTC timestamp column defaulting to insertion time."""
    return Column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow if onupdate else None,
        index=index,
    )


__all__ = ["create_id_column", "create_user_id_column", "create_timestamp_column"]
