"""SQLAlchemy ORM model for the offboarding_requests table."""

from datetime import date, datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base


class OffboardingRequestModel(Base):
    """ORM model for offboarding_requests table.

    ``system_ids`` is a JSON list of system ids and is empty when
    ``all_systems`` is set. The ids are not foreign keys: a request keeps
    its history after a listed system is deleted.
    """

    __tablename__ = "offboarding_requests"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    requested_by: Mapped[str] = mapped_column(String(26), nullable=False)
    system_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    all_systems: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    removal_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending", index=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<OffboardingRequestModel(id={self.id}, status={self.status})>"
