"""create directory search tables

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("is_online", sa.Boolean(), nullable=False),
        sa.Column("last_seen", sa.DateTime(), nullable=True),
        sa.Column("denomination", sa.String(length=200), nullable=True),
        sa.Column("denomination_name", sa.String(length=200), nullable=True),
        sa.Column("branch", sa.String(length=200), nullable=True),
        sa.Column("branch_name", sa.String(length=200), nullable=True),
        sa.Column("branch_location", sa.String(length=200), nullable=True),
        sa.Column("pastor", sa.String(length=200), nullable=True),
        sa.Column("pastor_email", sa.String(length=320), nullable=True),
        sa.Column("account_approved", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_users_email"), ["email"], unique=True)

    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("profession", sa.String(length=200), nullable=True),
        sa.Column("skills", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=120), nullable=True),
        sa.Column("experience", sa.Text(), nullable=True),
        sa.Column("services_offered", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("country", sa.String(length=120), nullable=True),
        sa.Column("church", sa.String(length=200), nullable=True),
        sa.Column("denomination", sa.String(length=200), nullable=True),
        sa.Column("profile_picture", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("email_verified", sa.Boolean(), nullable=False),
        sa.Column("phone_verified", sa.Boolean(), nullable=False),
        sa.Column("pastor_endorsed", sa.Boolean(), nullable=False),
        sa.Column("background_check", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("profiles", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_profiles_user_id"), ["user_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_profiles_status"), ["status"], unique=False)
        batch_op.create_index("idx_profiles_status_category", ["status", "category"], unique=False)
        batch_op.create_index("idx_profiles_status_country", ["status", "country"], unique=False)
        batch_op.create_index("idx_profiles_status_location", ["status", "location"], unique=False)
        batch_op.create_index("idx_profiles_status_updated", ["status", "updated_at"], unique=False)

    op.create_table(
        "search_history",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("query", sa.Text(), nullable=False),
        sa.Column("filters", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("search_history", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_search_history_user_id"), ["user_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_search_history_timestamp"), ["timestamp"], unique=False)
        batch_op.create_index("idx_search_history_user_timestamp", ["user_id", "timestamp"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("search_history", schema=None) as batch_op:
        batch_op.drop_index("idx_search_history_user_timestamp")
        batch_op.drop_index(batch_op.f("ix_search_history_timestamp"))
        batch_op.drop_index(batch_op.f("ix_search_history_user_id"))
    op.drop_table("search_history")

    with op.batch_alter_table("profiles", schema=None) as batch_op:
        batch_op.drop_index("idx_profiles_status_updated")
        batch_op.drop_index("idx_profiles_status_location")
        batch_op.drop_index("idx_profiles_status_country")
        batch_op.drop_index("idx_profiles_status_category")
        batch_op.drop_index(batch_op.f("ix_profiles_status"))
        batch_op.drop_index(batch_op.f("ix_profiles_user_id"))
    op.drop_table("profiles")

    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_users_email"))
    op.drop_table("users")
