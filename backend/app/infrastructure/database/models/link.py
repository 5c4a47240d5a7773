"""SQLAlchemy ORM model for the Link entity."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database.base import Base, TimestampedMixin
from app.infrastructure.database.models.codebase import CodebaseModel
from app.infrastructure.database.models.project import ProjectModel


class LinkModel(TimestampedMixin, Base):
    """ORM model — maps to the 'links' table.

    ``user_id`` duplicates the owner reachable through the project so list
    queries filter on a single column.
    """

    __tablename__ = "links"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    project_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    codebase_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("codebases.id", ondelete="SET NULL"), nullable=True
    )
    title: Mapped[str] = mapped_column(String(160), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False, default="OTHER")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    project: Mapped[ProjectModel] = relationship(lazy="raise")
    codebase: Mapped[CodebaseModel | None] = relationship(lazy="raise")

    __table_args__ = (
        Index("ix_links_user_updated", "user_id", "updated_at"),
        Index("ix_links_project", "project_id"),
        Index("ix_links_codebase", "codebase_id"),
    )

    def __repr__(self) -> str:
        return f"<LinkModel(id={self.id}, title='{self.title}')>"
