"""SQLAlchemy implementation of the ownership-scoped list queries."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.interfaces import ListingRepository
from app.domain.entities import DropdownOption, EntityKind, ListFilters
from app.infrastructure.database import mappers
from app.infrastructure.database.models import (
    ClientModel,
    CodebaseModel,
    FileModel,
    LinkModel,
    ProjectModel,
)
from app.infrastructure.database.ownership import list_predicate


@dataclass(frozen=True)
class _Resource:
    """How one entity kind is labelled, eagerly loaded and mapped."""

    model: type
    label: Any
    load_options: tuple
    to_entity: Callable[[Any], Any]


_RESOURCES: dict[EntityKind, _Resource] = {
    EntityKind.CLIENT: _Resource(
        model=ClientModel,
        label=ClientModel.name,
        load_options=(),
        to_entity=mappers.client_to_entity,
    ),
    EntityKind.PROJECT: _Resource(
        model=ProjectModel,
        label=ProjectModel.name,
        load_options=(joinedload(ProjectModel.client),),
        to_entity=mappers.project_to_entity,
    ),
    EntityKind.CODEBASE: _Resource(
        model=CodebaseModel,
        label=CodebaseModel.name,
        load_options=(
            joinedload(CodebaseModel.project).joinedload(ProjectModel.client),
        ),
        to_entity=mappers.codebase_to_entity,
    ),
    EntityKind.LINK: _Resource(
        model=LinkModel,
        label=LinkModel.title,
        load_options=(
            joinedload(LinkModel.project),
            joinedload(LinkModel.codebase),
        ),
        to_entity=mappers.link_to_entity,
    ),
    EntityKind.FILE: _Resource(
        model=FileModel,
        label=FileModel.filename,
        load_options=(),
        to_entity=mappers.file_to_entity,
    ),
}


class SQLAlchemyListingRepository(ListingRepository):
    """Count and windowed fetch for every list endpoint, one statement each."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def count(
        self,
        kind: EntityKind,
        user_id: str,
        *,
        filters: ListFilters,
        search: str = "",
    ) -> int:
        resource = _RESOURCES[kind]
        stmt = (
            select(func.count())
            .select_from(resource.model)
            .where(*list_predicate(kind, user_id, filters, search))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def fetch(
        self,
        kind: EntityKind,
        user_id: str,
        *,
        filters: ListFilters,
        search: str = "",
        skip: int = 0,
        take: int | None = None,
        dropdown: bool = False,
    ) -> list[Any]:
        resource = _RESOURCES[kind]
        model = resource.model
        clauses = list_predicate(kind, user_id, filters, search)

        if dropdown:
            stmt = (
                select(model.id, resource.label.label("name"))
                .where(*clauses)
                .order_by(resource.label.asc(), model.id.asc())
                .offset(skip)
                .limit(take)
            )
            result = await self._session.execute(stmt)
            return [DropdownOption(id=row.id, name=row.name) for row in result.all()]

        stmt = (
            select(model)
            .options(*resource.load_options)
            .where(*clauses)
            .order_by(model.updated_at.desc(), model.id.desc())
            .offset(skip)
            .limit(take)
        )
        result = await self._session.execute(stmt)
        return [resource.to_entity(row) for row in result.scalars().all()]
