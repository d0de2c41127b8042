"""create access records, system fields and offboarding tables

Revision ID: 8e52d0b4c7a1
Revises: 3c1f7a9e2b40
Create Date: 2026-10-12 10:02:47.093115

Access records and system fields cascade with their system. Offboarding
requests keep system ids as JSON so their history survives system deletion.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "8e52d0b4c7a1"
down_revision: Union[str, Sequence[str], None] = "3c1f7a9e2b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create access_records, system_fields and offboarding_requests tables.

    Key constraints:
    - uq_access_records_user_system: one record per user and system
    - uq_system_fields_system_name: field names unique per system
    """
    op.create_table(
        "access_records",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(26),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "system_id",
            sa.String(26),
            sa.ForeignKey("systems.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("role", sa.String(100), nullable=True),
        sa.Column("granted_date", sa.Date, nullable=False),
        sa.Column("granted_by", sa.String(26), nullable=True),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint(
            "user_id", "system_id", name="uq_access_records_user_system"
        ),
    )
    op.create_index("ix_access_records_user_id", "access_records", ["user_id"])
    op.create_index("ix_access_records_system_id", "access_records", ["system_id"])

    op.create_table(
        "system_fields",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column(
            "system_id",
            sa.String(26),
            sa.ForeignKey("systems.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("field_type", sa.String(20), nullable=False, server_default="text"),
        sa.Column("options", sa.JSON, nullable=False),
        sa.Column("required", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("system_id", "name", name="uq_system_fields_system_name"),
    )
    op.create_index("ix_system_fields_system_id", "system_fields", ["system_id"])

    op.create_table(
        "offboarding_requests",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(26),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("requested_by", sa.String(26), nullable=False),
        sa.Column("system_ids", sa.JSON, nullable=False),
        sa.Column("all_systems", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("removal_date", sa.Date, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "ix_offboarding_requests_user_id", "offboarding_requests", ["user_id"]
    )
    op.create_index("ix_offboarding_requests_status", "offboarding_requests", ["status"])


def downgrade() -> None:
    """Drop offboarding_requests, system_fields and access_records tables."""
    op.drop_index("ix_offboarding_requests_status", table_name="offboarding_requests")
    op.drop_index("ix_offboarding_requests_user_id", table_name="offboarding_requests")
    op.drop_table("offboarding_requests")
    op.drop_index("ix_system_fields_system_id", table_name="system_fields")
    op.drop_table("system_fields")
    op.drop_index("ix_access_records_system_id", table_name="access_records")
    op.drop_index("ix_access_records_user_id", table_name="access_records")
    op.drop_table("access_records")
