"""Unit tests for the ClientService."""

import pytest

from app.application.schemas import ClientPayload
from app.application.services import ClientService
from app.domain.entities import EngagementType, FileAttachment
from app.domain.exceptions import EntityNotFoundError, ValidationError


@pytest.fixture
def service(client_repository, listing, cleanup, unit_of_work) -> ClientService:
    return ClientService(client_repository, listing, cleanup, unit_of_work)


def _payload(**overrides) -> ClientPayload:
    data = {
        "name": "Acme",
        "engagementType": "TIME_BASED",
        "workingDaysPerWeek": 5,
        "workingHoursPerDay": 8,
    }
    data.update(overrides)
    return ClientPayload.model_validate(data)


@pytest.mark.asyncio
async def test_create_client_is_owned_by_caller(service: ClientService):
    client = await service.create_client("alice", _payload())
    assert client.user_id == "alice"
    assert client.working_days_per_week == 5


@pytest.mark.asyncio
async def test_project_based_client_drops_working_schedule(service: ClientService):
    client = await service.create_client(
        "alice", _payload(engagementType="PROJECT_BASED")
    )
    assert client.engagement_type == EngagementType.PROJECT_BASED
    assert client.working_days_per_week is None
    assert client.working_hours_per_day is None


@pytest.mark.asyncio
async def test_time_based_client_requires_schedule(service: ClientService):
    with pytest.raises(ValidationError) as exc_info:
        await service.create_client("alice", _payload(workingHoursPerDay=None))

    assert exc_info.value.message == "Working hours are required for time based engagement."
    assert set(exc_info.value.errors) == {"workingHoursPerDay"}


@pytest.mark.asyncio
async def test_get_client_of_another_user_is_not_found(service: ClientService):
    client = await service.create_client("alice", _payload())
    with pytest.raises(EntityNotFoundError, match="Client not found."):
        await service.get_client("bob", client.id)


@pytest.mark.asyncio
async def test_update_is_idempotent(service: ClientService):
    client = await service.create_client("alice", _payload())
    payload = _payload(name="Acme Ltd", notes="Retainer")

    first = await service.update_client("alice", client.id, payload)
    second = await service.update_client("alice", client.id, payload)

    assert first.name == second.name == "Acme Ltd"
    assert first.notes == second.notes == "Retainer"


@pytest.mark.asyncio
async def test_update_foreign_client_is_not_found(service: ClientService):
    client = await service.create_client("alice", _payload())
    with pytest.raises(EntityNotFoundError):
        await service.update_client("bob", client.id, _payload(name="Hijacked"))

    assert (await service.get_client("alice", client.id)).name == "Acme"


@pytest.mark.asyncio
async def test_delete_client_discards_attached_blobs(service, store, file_storage):
    client = await service.create_client("alice", _payload())
    file_storage.blobs["alice/blob-1"] = b"invoice"
    store.files["f-1"] = FileAttachment(
        id="f-1",
        user_id="alice",
        filename="invoice.pdf",
        storage_path="alice/blob-1",
        mime_type="application/pdf",
        size_bytes=7,
        client_id=client.id,
    )

    await service.delete_client("alice", client.id)

    assert file_storage.blobs == {}
    with pytest.raises(EntityNotFoundError):
        await service.get_client("alice", client.id)


@pytest.mark.asyncio
async def test_delete_foreign_client_keeps_blobs(service, file_storage):
    client = await service.create_client("alice", _payload())
    file_storage.blobs["alice/blob-1"] = b"keep"

    with pytest.raises(EntityNotFoundError):
        await service.delete_client("bob", client.id)

    assert "alice/blob-1" in file_storage.blobs


@pytest.mark.asyncio
async def test_writes_are_committed_before_returning(service, unit_of_work):
    client = await service.create_client("alice", _payload())
    await service.update_client("alice", client.id, _payload(name="Acme Ltd"))
    await service.delete_client("alice", client.id)

    assert unit_of_work.commits == 3


@pytest.mark.asyncio
async def test_failed_commit_on_delete_keeps_blobs(service, store, file_storage, unit_of_work):
    client = await service.create_client("alice", _payload())
    file_storage.blobs["alice/blob-1"] = b"invoice"
    store.files["f-1"] = FileAttachment(
        id="f-1",
        user_id="alice",
        filename="invoice.pdf",
        storage_path="alice/blob-1",
        mime_type="application/pdf",
        size_bytes=7,
        client_id=client.id,
    )
    unit_of_work.error = OSError("database is locked")

    with pytest.raises(OSError):
        await service.delete_client("alice", client.id)

    assert file_storage.blobs == {"alice/blob-1": b"invoice"}
