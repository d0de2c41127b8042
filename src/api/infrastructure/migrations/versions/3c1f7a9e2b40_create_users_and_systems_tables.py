"""create users and systems tables

Revision ID: 3c1f7a9e2b40
Revises:
Create Date: 2026-10-12 09:14:03.512884

Creates the users, systems and system_co_owners tables. System owners use a
RESTRICT FK so a user cannot be removed while owning a system.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f7a9e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, systems and system_co_owners tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("department", sa.String(255), nullable=False, server_default=""),
        sa.Column("role", sa.String(20), nullable=False, server_default="member"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "systems",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column(
            "owner_id",
            sa.String(26),
            sa.ForeignKey("users.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("approved", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_systems_category", "systems", ["category"])
    op.create_index("ix_systems_owner_id", "systems", ["owner_id"])

    op.create_table(
        "system_co_owners",
        sa.Column(
            "system_id",
            sa.String(26),
            sa.ForeignKey("systems.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "user_id",
            sa.String(26),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index("ix_system_co_owners_user_id", "system_co_owners", ["user_id"])


def downgrade() -> None:
    """Drop system_co_owners, systems and users tables."""
    op.drop_index("ix_system_co_owners_user_id", table_name="system_co_owners")
    op.drop_table("system_co_owners")
    op.drop_index("ix_systems_owner_id", table_name="systems")
    op.drop_index("ix_systems_category", table_name="systems")
    op.drop_table("systems")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
