"""SQLAlchemy ORM model for the Project entity."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database.base import Base, TimestampedMixin
from app.infrastructure.database.models.client import ClientModel


class ProjectModel(TimestampedMixin, Base):
    """ORM model — maps to the 'projects' table."""

    __tablename__ = "projects"

    client_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVE")

    client: Mapped[ClientModel] = relationship(lazy="raise")

    __table_args__ = (
        Index("ix_projects_client", "client_id"),
    )

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, name='{self.name}')>"
