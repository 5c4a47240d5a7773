"""ORM model → domain entity mapping shared by the repositories.

Parent names are only read when the relationship was eagerly loaded; the
relationships are declared ``lazy="raise"`` so a missing load option fails
loudly instead of issuing a hidden query.
"""

from app.domain.entities import (
    Client,
    Codebase,
    CodebaseType,
    EngagementType,
    FileAttachment,
    Link,
    LinkCategory,
    Project,
    ProjectStatus,
    User,
)
from app.infrastructure.database.models import (
    ClientModel,
    CodebaseModel,
    FileModel,
    LinkModel,
    ProjectModel,
    UserModel,
)


def user_to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        email=model.email,
        name=model.name,
        password_hash=model.password_hash,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def client_to_entity(model: ClientModel) -> Client:
    return Client(
        id=model.id,
        user_id=model.user_id,
        name=model.name,
        engagement_type=EngagementType(model.engagement_type),
        working_days_per_week=model.working_days_per_week,
        working_hours_per_day=model.working_hours_per_day,
        email=model.email,
        phone=model.phone,
        whatsapp=model.whatsapp,
        address=model.address,
        notes=model.notes,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def project_to_entity(model: ProjectModel) -> Project:
    return Project(
        id=model.id,
        client_id=model.client_id,
        name=model.name,
        status=ProjectStatus(model.status),
        description=model.description,
        client_name=model.client.name,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def codebase_to_entity(model: CodebaseModel) -> Codebase:
    project = model.project
    return Codebase(
        id=model.id,
        project_id=model.project_id,
        name=model.name,
        type=CodebaseType(model.type),
        description=model.description,
        client_id=project.client_id,
        client_name=project.client.name,
        project_name=project.name,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def link_to_entity(model: LinkModel) -> Link:
    return Link(
        id=model.id,
        user_id=model.user_id,
        project_id=model.project_id,
        codebase_id=model.codebase_id,
        title=model.title,
        url=model.url,
        category=LinkCategory(model.category),
        notes=model.notes,
        project_name=model.project.name,
        codebase_name=model.codebase.name if model.codebase else None,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def file_to_entity(model: FileModel) -> FileAttachment:
    return FileAttachment(
        id=model.id,
        user_id=model.user_id,
        filename=model.filename,
        storage_path=model.storage_path,
        mime_type=model.mime_type,
        size_bytes=model.size_bytes,
        client_id=model.client_id,
        project_id=model.project_id,
        codebase_id=model.codebase_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
