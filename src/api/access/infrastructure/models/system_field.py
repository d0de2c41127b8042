"""SQLAlchemy ORM model for the system_fields table."""

from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base


class SystemFieldModel(Base):
    """ORM model for system_fields table.

    Unique Constraint:
    - uq_system_fields_system_name: field names are unique per system
    """

    __tablename__ = "system_fields"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    system_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("systems.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    field_type: Mapped[str] = mapped_column(String(20), nullable=False, default="text")
    options: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("system_id", "name", name="uq_system_fields_system_name"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<SystemFieldModel(id={self.id}, name={self.name})>"
