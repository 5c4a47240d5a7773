"""Unit tests for the ProjectService."""

import pytest

from app.application.schemas import ProjectPayload
from app.application.services import ProjectService
from app.domain.entities import Client, EngagementType, ProjectStatus
from app.domain.exceptions import EntityNotFoundError


@pytest.fixture
def service(project_repository, listing, guard, cleanup, unit_of_work) -> ProjectService:
    return ProjectService(project_repository, listing, guard, cleanup, unit_of_work)


@pytest.fixture
def clients(store) -> dict[str, Client]:
    store.clients["c-alice"] = Client(
        id="c-alice", user_id="alice", name="Acme", engagement_type=EngagementType.PROJECT_BASED
    )
    store.clients["c-bob"] = Client(
        id="c-bob", user_id="bob", name="Globex", engagement_type=EngagementType.PROJECT_BASED
    )
    return store.clients


@pytest.mark.asyncio
async def test_create_project_under_own_client(service: ProjectService, clients):
    project = await service.create_project(
        "alice", ProjectPayload(client_id="c-alice", name="Website")
    )
    assert project.client_name == "Acme"
    assert project.status == ProjectStatus.ACTIVE


@pytest.mark.asyncio
async def test_create_project_under_foreign_client_is_not_found(service: ProjectService, clients):
    with pytest.raises(EntityNotFoundError, match="Client not found."):
        await service.create_project("alice", ProjectPayload(client_id="c-bob", name="Sneaky"))


@pytest.mark.asyncio
async def test_update_project_cannot_move_to_foreign_client(service: ProjectService, clients):
    project = await service.create_project(
        "alice", ProjectPayload(client_id="c-alice", name="Website")
    )
    with pytest.raises(EntityNotFoundError):
        await service.update_project(
            "alice", project.id, ProjectPayload(client_id="c-bob", name="Website")
        )


@pytest.mark.asyncio
async def test_update_project_fields(service: ProjectService, clients):
    project = await service.create_project(
        "alice", ProjectPayload(client_id="c-alice", name="Website")
    )
    updated = await service.update_project(
        "alice",
        project.id,
        ProjectPayload(client_id="c-alice", name="Website v2", status="PAUSED"),
    )
    assert updated.name == "Website v2"
    assert updated.status == ProjectStatus.PAUSED


@pytest.mark.asyncio
async def test_delete_project_of_another_user_is_not_found(service: ProjectService, clients):
    project = await service.create_project(
        "alice", ProjectPayload(client_id="c-alice", name="Website")
    )
    with pytest.raises(EntityNotFoundError):
        await service.delete_project("bob", project.id)
