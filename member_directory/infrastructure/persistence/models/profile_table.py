"""
SQLModel Profile table definition.

Profiles are written by the profile submission and approval workflows; the
search layer only reads them.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, Index, String, Text
from sqlmodel import Field, SQLModel

from member_directory.infrastructure.persistence.models.base import (
    create_id_column,
    create_timestamp_column,
    create_user_id_column,
)


class ProfileTable(SQLModel, table=True):
    """Directory profile row with the searchable text fields denormalized."""

    __tablename__ = "profiles"

    __table_args__ = (
        Index("idx_profiles_status_category", "status", "category"),
        Index("idx_profiles_status_country", "status", "country"),
        Index("idx_profiles_status_location", "status", "location"),
        Index("idx_profiles_status_updated", "status", "updated_at"),
    )

    id: UUID = Field(sa_column=create_id_column(), description="Profile identifier")
    user_id: UUID = Field(sa_column=create_user_id_column(), description="Owning user")

    name: str = Field(sa_column=Column(String(200), nullable=False))
    profession: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    skills: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    category: Optional[str] = Field(default=None, sa_column=Column(String(120), nullable=True))
    experience: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    services_offered: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    location: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    country: Optional[str] = Field(default=None, sa_column=Column(String(120), nullable=True))
    church: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    denomination: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    profile_picture: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    status: str = Field(
        default="pending",
        sa_column=Column(String(20), nullable=False, default="pending", index=True),
        description="Approval status (pending, approved, rejected)"
    )

    # Verification badges
    email_verified: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    phone_verified: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    pastor_endorsed: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    background_check: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))

    created_at: datetime = Field(sa_column=create_timestamp_column())
    updated_at: datetime = Field(sa_column=create_timestamp_column(onupdate=True))


__all__ = ["ProfileTable"]
