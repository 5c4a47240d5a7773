"""SQLAlchemy ORM model for the Client entity."""

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base, TimestampedMixin


class ClientModel(TimestampedMixin, Base):
    """ORM model — maps to the 'clients' table."""

    __tablename__ = "clients"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    engagement_type: Mapped[str] = mapped_column(String(20), nullable=False)
    working_days_per_week: Mapped[int | None] = mapped_column(Integer, nullable=True)
    working_hours_per_day: Mapped[int | None] = mapped_column(Integer, nullable=True)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    whatsapp: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_clients_user", "user_id"),
        Index("ix_clients_user_updated", "user_id", "updated_at"),
    )

    def __repr__(self) -> str:
        return f"<ClientModel(id={self.id}, name='{self.name}')>"
