"""SQLAlchemy ORM models for the systems and system_co_owners tables."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base


class SystemModel(Base):
    """ORM model for systems table.

    Foreign Key Constraints:
    - owner_id references users.id with RESTRICT delete

    Access records, custom fields and co-owner rows reference this table
    with CASCADE delete.
    """

    __tablename__ = "systems"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    owner_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    co_owners: Mapped[list["SystemCoOwnerModel"]] = relationship(
        back_populates="system",
        cascade="all, delete-orphan",
        order_by="SystemCoOwnerModel.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<SystemModel(id={self.id}, name={self.name})>"


class SystemCoOwnerModel(Base):
    """ORM model for system_co_owners table.

    ``position`` preserves the order in which co-owners were added.
    """

    __tablename__ = "system_co_owners"

    system_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("systems.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    system: Mapped[SystemModel] = relationship(back_populates="co_owners")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<SystemCoOwnerModel(system_id={self.system_id}, user_id={self.user_id})>"
