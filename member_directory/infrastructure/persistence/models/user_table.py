"""SQLModel User table definition (read-only for the search layer)."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, DateTime, String
from sqlmodel import Field, SQLModel

from member_directory.infrastructure.persistence.models.base import (
    create_id_column,
    create_timestamp_column,
)


class UserTable(SQLModel, table=True):
    """Member account row; credentials live with the auth workflow, not here."""

    __tablename__ = "users"

    id: UUID = Field(sa_column=create_id_column(), description="User identifier")
    name: str = Field(sa_column=Column(String(200), nullable=False))
    email: str = Field(sa_column=Column(String(320), nullable=False, unique=True, index=True))
    phone: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    role: str = Field(
        default="member",
        sa_column=Column(String(20), nullable=False, default="member"),
        description="Account role (admin, member)"
    )

    is_online: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    last_seen: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))

    # Church affiliation
    denomination: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    denomination_name: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    branch: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    branch_name: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    branch_location: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    pastor: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    pastor_email: Optional[str] = Field(default=None, sa_column=Column(String(320), nullable=True))

    account_approved: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    created_at: datetime = Field(sa_column=create_timestamp_column())


__all__ = ["UserTable"]
