"""SQL predicates that scope every query to the requesting user.

The ownership clause is the only thing standing between tenants, so every
list, count, update and delete statement starts from ``ownership_filter``
and only ever AND-s further conditions onto it.
"""

from sqlalchemy import ColumnElement, or_

from app.domain.entities import EntityKind, ListFilters
from app.infrastructure.database.models import (
    ClientModel,
    CodebaseModel,
    FileModel,
    LinkModel,
    ProjectModel,
)

MODELS = {
    EntityKind.CLIENT: ClientModel,
    EntityKind.PROJECT: ProjectModel,
    EntityKind.CODEBASE: CodebaseModel,
    EntityKind.LINK: LinkModel,
    EntityKind.FILE: FileModel,
}


def ownership_filter(kind: EntityKind, user_id: str) -> ColumnElement[bool]:
    """Boolean clause true only for rows whose ownership chain ends at ``user_id``."""
    if kind is EntityKind.CLIENT:
        return ClientModel.user_id == user_id
    if kind is EntityKind.PROJECT:
        return ProjectModel.client.has(ClientModel.user_id == user_id)
    if kind is EntityKind.CODEBASE:
        return CodebaseModel.project.has(
            ProjectModel.client.has(ClientModel.user_id == user_id)
        )
    if kind is EntityKind.LINK:
        return LinkModel.user_id == user_id
    if kind is EntityKind.FILE:
        return FileModel.user_id == user_id
    raise ValueError(f"Unsupported entity kind: {kind}")


def cascading_filters(kind: EntityKind, filters: ListFilters) -> list[ColumnElement[bool]]:
    """Parent-id conditions ``kind`` supports; unset or unsupported filters are skipped."""
    clauses: list[ColumnElement[bool]] = []

    if kind is EntityKind.PROJECT:
        if filters.client_id:
            clauses.append(ProjectModel.client_id == filters.client_id)

    elif kind is EntityKind.CODEBASE:
        if filters.client_id:
            clauses.append(
                CodebaseModel.project.has(ProjectModel.client_id == filters.client_id)
            )
        if filters.project_id:
            clauses.append(CodebaseModel.project_id == filters.project_id)

    elif kind is EntityKind.LINK:
        if filters.client_id:
            clauses.append(
                LinkModel.project.has(ProjectModel.client_id == filters.client_id)
            )
        if filters.project_id:
            clauses.append(LinkModel.project_id == filters.project_id)
        if filters.codebase_id:
            clauses.append(LinkModel.codebase_id == filters.codebase_id)

    elif kind is EntityKind.FILE:
        if filters.client_id:
            clauses.append(FileModel.client_id == filters.client_id)
        if filters.project_id:
            clauses.append(FileModel.project_id == filters.project_id)
        if filters.codebase_id:
            clauses.append(FileModel.codebase_id == filters.codebase_id)

    return clauses


def search_filter(kind: EntityKind, search: str) -> ColumnElement[bool] | None:
    """Case-insensitive substring match on the label and related names.

    LIKE wildcards in ``search`` are escaped so they match literally.
    """
    if not search:
        return None

    def contains(column):
        return column.icontains(search, autoescape=True)

    if kind is EntityKind.CLIENT:
        return contains(ClientModel.name)
    if kind is EntityKind.PROJECT:
        return or_(
            contains(ProjectModel.name),
            ProjectModel.client.has(contains(ClientModel.name)),
        )
    if kind is EntityKind.CODEBASE:
        return or_(
            contains(CodebaseModel.name),
            CodebaseModel.project.has(contains(ProjectModel.name)),
        )
    if kind is EntityKind.LINK:
        return or_(
            contains(LinkModel.title),
            contains(LinkModel.url),
            LinkModel.project.has(contains(ProjectModel.name)),
            LinkModel.codebase.has(contains(CodebaseModel.name)),
        )
    if kind is EntityKind.FILE:
        return contains(FileModel.filename)
    raise ValueError(f"Unsupported entity kind: {kind}")


def list_predicate(
    kind: EntityKind, user_id: str, filters: ListFilters, search: str = ""
) -> list[ColumnElement[bool]]:
    """Ownership ∧ cascading filters ∧ search, as a list of WHERE clauses."""
    clauses = [ownership_filter(kind, user_id), *cascading_filters(kind, filters)]
    matched = search_filter(kind, search)
    if matched is not None:
        clauses.append(matched)
    return clauses
