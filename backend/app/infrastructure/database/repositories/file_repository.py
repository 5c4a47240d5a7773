"""SQLAlchemy implementation of the FileRepository for uploaded file metadata."""

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import FileRepository
from app.domain.entities import EntityKind, FileAttachment
from app.infrastructure.database.mappers import file_to_entity
from app.infrastructure.database.models import CodebaseModel, FileModel, ProjectModel
from app.infrastructure.database.ownership import ownership_filter


class SQLAlchemyFileRepository(FileRepository):
    """Concrete file repository; rows are scoped by the uploading user."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, user_id: str, file_id: str) -> FileAttachment | None:
        result = await self._session.execute(
            select(FileModel).where(
                FileModel.id == file_id,
                ownership_filter(EntityKind.FILE, user_id),
            )
        )
        model = result.scalar_one_or_none()
        return file_to_entity(model) if model else None

    async def create(self, attachment: FileAttachment) -> FileAttachment:
        model = FileModel(
            id=attachment.id,
            user_id=attachment.user_id,
            client_id=attachment.client_id,
            project_id=attachment.project_id,
            codebase_id=attachment.codebase_id,
            filename=attachment.filename,
            storage_path=attachment.storage_path,
            mime_type=attachment.mime_type,
            size_bytes=attachment.size_bytes,
            created_at=attachment.created_at,
            updated_at=attachment.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return file_to_entity(model)

    async def delete(self, user_id: str, file_id: str) -> bool:
        result = await self._session.execute(
            delete(FileModel)
            .where(
                FileModel.id == file_id,
                ownership_filter(EntityKind.FILE, user_id),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def storage_paths_under(
        self, user_id: str, kind: EntityKind, entity_id: str
    ) -> list[str]:
        if kind is EntityKind.CLIENT:
            project_ids = select(ProjectModel.id).where(ProjectModel.client_id == entity_id)
            codebase_ids = select(CodebaseModel.id).where(
                CodebaseModel.project_id.in_(project_ids)
            )
            scope = or_(
                FileModel.client_id == entity_id,
                FileModel.project_id.in_(project_ids),
                FileModel.codebase_id.in_(codebase_ids),
            )
        elif kind is EntityKind.PROJECT:
            codebase_ids = select(CodebaseModel.id).where(
                CodebaseModel.project_id == entity_id
            )
            scope = or_(
                FileModel.project_id == entity_id,
                FileModel.codebase_id.in_(codebase_ids),
            )
        elif kind is EntityKind.CODEBASE:
            scope = FileModel.codebase_id == entity_id
        else:
            raise ValueError(f"Files are not attached to {kind.value} records")

        result = await self._session.execute(
            select(FileModel.storage_path).where(
                ownership_filter(EntityKind.FILE, user_id), scope
            )
        )
        return list(result.scalars().all())
