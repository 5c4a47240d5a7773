"""Unit tests for the CodebaseService, including reassignment between projects."""

import pytest

from app.application.schemas import CodebasePayload
from app.application.services import CodebaseService
from app.domain.entities import Client, EngagementType, Link, Project
from app.domain.exceptions import EntityNotFoundError


@pytest.fixture
def service(codebase_repository, listing, guard, cleanup, unit_of_work) -> CodebaseService:
    return CodebaseService(codebase_repository, listing, guard, cleanup, unit_of_work)


@pytest.fixture(autouse=True)
def hierarchy(store):
    store.clients["c-1"] = Client(
        id="c-1", user_id="alice", name="Acme", engagement_type=EngagementType.PROJECT_BASED
    )
    store.clients["c-bob"] = Client(
        id="c-bob", user_id="bob", name="Globex", engagement_type=EngagementType.PROJECT_BASED
    )
    store.projects["p-1"] = Project(id="p-1", client_id="c-1", name="Website")
    store.projects["p-2"] = Project(id="p-2", client_id="c-1", name="Mobile")
    store.projects["p-bob"] = Project(id="p-bob", client_id="c-bob", name="Secret")


@pytest.mark.asyncio
async def test_create_codebase_resolves_parent_names(service: CodebaseService):
    codebase = await service.create_codebase(
        "alice", CodebasePayload(project_id="p-1", name="frontend", type="WEB")
    )
    assert codebase.project_name == "Website"
    assert codebase.client_id == "c-1"


@pytest.mark.asyncio
async def test_moving_codebase_moves_its_links(service, store, codebase_repository):
    codebase = await service.create_codebase(
        "alice", CodebasePayload(project_id="p-1", name="api")
    )
    store.links["l-1"] = Link(
        id="l-1", user_id="alice", project_id="p-1", codebase_id=codebase.id,
        title="Repo", url="https://git.example.com/api",
    )
    store.links["l-2"] = Link(
        id="l-2", user_id="alice", project_id="p-1", title="Board", url="https://board.example.com",
    )

    moved = await service.update_codebase(
        "alice", codebase.id, CodebasePayload(project_id="p-2", name="api")
    )

    assert moved.project_id == "p-2"
    assert codebase_repository.cascade_calls == [True]
    assert store.links["l-1"].project_id == "p-2"
    assert store.links["l-2"].project_id == "p-1"


@pytest.mark.asyncio
async def test_update_in_place_does_not_cascade(service, codebase_repository):
    codebase = await service.create_codebase(
        "alice", CodebasePayload(project_id="p-1", name="api")
    )
    await service.update_codebase(
        "alice", codebase.id, CodebasePayload(project_id="p-1", name="api-v2")
    )
    assert codebase_repository.cascade_calls == [False]


@pytest.mark.asyncio
async def test_cannot_move_codebase_into_foreign_project(service, store, codebase_repository):
    codebase = await service.create_codebase(
        "alice", CodebasePayload(project_id="p-1", name="api")
    )
    with pytest.raises(EntityNotFoundError, match="Project not found."):
        await service.update_codebase(
            "alice", codebase.id, CodebasePayload(project_id="p-bob", name="api")
        )

    assert store.codebases[codebase.id].project_id == "p-1"
    assert codebase_repository.cascade_calls == []


@pytest.mark.asyncio
async def test_update_unknown_codebase_is_not_found(service: CodebaseService):
    with pytest.raises(EntityNotFoundError, match="Codebase not found."):
        await service.update_codebase(
            "alice", "missing", CodebasePayload(project_id="p-1", name="api")
        )


@pytest.mark.asyncio
async def test_failed_commit_surfaces_from_move(service, unit_of_work):
    codebase = await service.create_codebase(
        "alice", CodebasePayload(project_id="p-1", name="api")
    )
    unit_of_work.error = OSError("connection reset")

    with pytest.raises(OSError):
        await service.update_codebase(
            "alice", codebase.id, CodebasePayload(project_id="p-2", name="api")
        )
    assert unit_of_work.commits == 1
