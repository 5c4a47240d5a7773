"""SQLAlchemy ORM model for uploaded file metadata."""

from sqlalchemy import BigInteger, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base, TimestampedMixin


class FileModel(TimestampedMixin, Base):
    """ORM model — maps to the 'files' table.

    The scope columns cascade on delete so files vanish with the client,
    project or codebase they were attached to.
    """

    __tablename__ = "files"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    client_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=True
    )
    project_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=True
    )
    codebase_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("codebases.id", ondelete="CASCADE"), nullable=True
    )
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    storage_path: Mapped[str] = mapped_column(String(512), nullable=False)
    mime_type: Mapped[str] = mapped_column(String(255), nullable=False)
    size_bytes: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        Index("ix_files_user_created", "user_id", "created_at"),
        Index("ix_files_client", "client_id"),
        Index("ix_files_project", "project_id"),
        Index("ix_files_codebase", "codebase_id"),
    )

    def __repr__(self) -> str:
        return f"<FileModel(id={self.id}, filename='{self.filename}')>"
