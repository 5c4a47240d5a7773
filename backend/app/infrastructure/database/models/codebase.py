"""SQLAlchemy ORM model for the Codebase entity."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database.base import Base, TimestampedMixin
from app.infrastructure.database.models.project import ProjectModel


class CodebaseModel(TimestampedMixin, Base):
    """ORM model — maps to the 'codebases' table."""

    __tablename__ = "codebases"

    project_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="OTHER")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    project: Mapped[ProjectModel] = relationship(lazy="raise")

    __table_args__ = (
        Index("ix_codebases_project", "project_id"),
    )

    def __repr__(self) -> str:
        return f"<CodebaseModel(id={self.id}, name='{self.name}')>"
