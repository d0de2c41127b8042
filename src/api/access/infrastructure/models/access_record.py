"""SQLAlchemy ORM model for the access_records table."""

from datetime import date
from typing import Any

from sqlalchemy import JSON, Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class AccessRecordModel(Base, TimestampMixin):
    """ORM model for access_records table.

    Unique Constraint:
    - uq_access_records_user_system: one record per (user_id, system_id)

    ``tags`` holds an ordered JSON list of ``{"key": ..., "value": ...}``
    objects.
    """

    __tablename__ = "access_records"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    system_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("systems.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    granted_date: Mapped[date] = mapped_column(Date, nullable=False)
    granted_by: Mapped[str | None] = mapped_column(String(26), nullable=True)
    tags: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )

    __table_args__ = (
        UniqueConstraint(
            "user_id", "system_id", name="uq_access_records_user_system"
        ),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<AccessRecordModel(id={self.id}, user_id={self.user_id}, "
            f"system_id={self.system_id})>"
        )
