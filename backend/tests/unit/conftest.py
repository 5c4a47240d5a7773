"""In-memory fakes of the repository ports shared by the service tests."""

from dataclasses import replace

import pytest

from app.application.interfaces import (
    ClientRepository,
    CodebaseRepository,
    FileRepository,
    FileStorage,
    LinkRepository,
    ListingRepository,
    OwnershipRepository,
    PasswordHasher,
    ProjectRepository,
    SessionTokenCodec,
    UnitOfWork,
    UserRepository,
)
from app.application.services import AttachmentCleanup, ListingService, OwnershipGuard


class FakeListingRepository(ListingRepository):
    async def count(self, kind, user_id, *, filters, search=""):
        return 0

    async def fetch(self, kind, user_id, *, filters, search="", skip=0, take=None, dropdown=False):
        return []


class InMemoryStore:
    """Rows of every kind plus their owner, enough to answer ownership questions."""

    def __init__(self):
        self.clients = {}
        self.projects = {}
        self.codebases = {}
        self.links = {}
        self.files = {}

    def client_owner(self, client_id):
        client = self.clients.get(client_id)
        return client.user_id if client else None

    def project_owner(self, project_id):
        project = self.projects.get(project_id)
        return self.client_owner(project.client_id) if project else None

    def codebase_owner(self, codebase_id):
        codebase = self.codebases.get(codebase_id)
        return self.project_owner(codebase.project_id) if codebase else None


class FakeOwnershipRepository(OwnershipRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def client_exists(self, user_id, client_id):
        return self._store.client_owner(client_id) == user_id

    async def project_exists(self, user_id, project_id):
        return self._store.project_owner(project_id) == user_id

    async def codebase_exists_in_project(self, user_id, codebase_id, project_id):
        codebase = self._store.codebases.get(codebase_id)
        return (
            codebase is not None
            and codebase.project_id == project_id
            and self._store.codebase_owner(codebase_id) == user_id
        )


class FakeClientRepository(ClientRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get(self, user_id, client_id):
        client = self._store.clients.get(client_id)
        return replace(client) if client and client.user_id == user_id else None

    async def create(self, client):
        self._store.clients[client.id] = replace(client)
        return client

    async def update(self, user_id, client):
        if self._store.client_owner(client.id) != user_id:
            return False
        self._store.clients[client.id] = replace(client)
        return True

    async def delete(self, user_id, client_id):
        if self._store.client_owner(client_id) != user_id:
            return False
        del self._store.clients[client_id]
        return True


class FakeProjectRepository(ProjectRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get(self, user_id, project_id):
        if self._store.project_owner(project_id) != user_id:
            return None
        project = self._store.projects[project_id]
        return replace(project, client_name=self._store.clients[project.client_id].name)

    async def create(self, project):
        self._store.projects[project.id] = replace(project)
        return project

    async def update(self, user_id, project):
        if self._store.project_owner(project.id) != user_id:
            return False
        self._store.projects[project.id] = replace(project)
        return True

    async def delete(self, user_id, project_id):
        if self._store.project_owner(project_id) != user_id:
            return False
        del self._store.projects[project_id]
        return True


class FakeCodebaseRepository(CodebaseRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store
        self.cascade_calls: list[bool] = []

    async def get(self, user_id, codebase_id):
        if self._store.codebase_owner(codebase_id) != user_id:
            return None
        codebase = self._store.codebases[codebase_id]
        project = self._store.projects[codebase.project_id]
        return replace(codebase, project_name=project.name, client_id=project.client_id)

    async def create(self, codebase):
        self._store.codebases[codebase.id] = replace(codebase)
        return codebase

    async def update(self, user_id, codebase, *, cascade_links=False):
        if self._store.codebase_owner(codebase.id) != user_id:
            return False
        self.cascade_calls.append(cascade_links)
        self._store.codebases[codebase.id] = replace(codebase)
        if cascade_links:
            for link in self._store.links.values():
                if link.codebase_id == codebase.id and link.user_id == user_id:
                    link.project_id = codebase.project_id
        return True

    async def delete(self, user_id, codebase_id):
        if self._store.codebase_owner(codebase_id) != user_id:
            return False
        del self._store.codebases[codebase_id]
        return True


class FakeLinkRepository(LinkRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get(self, user_id, link_id):
        link = self._store.links.get(link_id)
        return replace(link) if link and link.user_id == user_id else None

    async def create(self, link):
        self._store.links[link.id] = replace(link)
        return link

    async def update(self, user_id, link):
        existing = self._store.links.get(link.id)
        if existing is None or existing.user_id != user_id:
            return False
        self._store.links[link.id] = replace(link, user_id=existing.user_id)
        return True

    async def delete(self, user_id, link_id):
        link = self._store.links.get(link_id)
        if link is None or link.user_id != user_id:
            return False
        del self._store.links[link_id]
        return True


class FakeFileRepository(FileRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get(self, user_id, file_id):
        attachment = self._store.files.get(file_id)
        return attachment if attachment and attachment.user_id == user_id else None

    async def create(self, attachment):
        self._store.files[attachment.id] = attachment
        return attachment

    async def delete(self, user_id, file_id):
        attachment = self._store.files.get(file_id)
        if attachment is None or attachment.user_id != user_id:
            return False
        del self._store.files[file_id]
        return True

    async def storage_paths_under(self, user_id, kind, entity_id):
        field = f"{kind.value}_id"
        return [
            attachment.storage_path
            for attachment in self._store.files.values()
            if attachment.user_id == user_id and getattr(attachment, field) == entity_id
        ]


class FakeFileStorage(FileStorage):
    def __init__(self):
        self.blobs: dict[str, bytes] = {}
        self._counter = 0

    def allocate_path(self, owner_id, filename):
        self._counter += 1
        return f"{owner_id}/blob-{self._counter}"

    async def save(self, storage_path, content):
        self.blobs[storage_path] = content

    async def read(self, storage_path):
        if storage_path not in self.blobs:
            raise FileNotFoundError(storage_path)
        return self.blobs[storage_path]

    async def delete(self, storage_path):
        self.blobs.pop(storage_path, None)


class FakeUserRepository(UserRepository):
    def __init__(self):
        self.users = {}

    async def get_by_id(self, user_id):
        return self.users.get(user_id)

    async def get_by_email(self, email):
        return next((u for u in self.users.values() if u.email == email.lower()), None)

    async def create(self, user):
        self.users[user.id] = user
        return user

    async def update_name(self, user_id, name):
        if user_id not in self.users:
            return False
        self.users[user_id].name = name
        return True

    async def update_password_hash(self, user_id, password_hash):
        if user_id not in self.users:
            return False
        self.users[user_id].password_hash = password_hash
        return True


class PlainPasswordHasher(PasswordHasher):
    def hash(self, password):
        return f"hashed:{password}"

    def verify(self, password, password_hash):
        return password_hash == f"hashed:{password}"


class FakeTokenCodec(SessionTokenCodec):
    def issue(self, user_id):
        return f"token:{user_id}"

    def decode(self, token):
        return token.removeprefix("token:") if token.startswith("token:") else None


class FakeUnitOfWork(UnitOfWork):
    """Counts commits; set ``error`` to make the next commit fail."""

    def __init__(self):
        self.commits = 0
        self.error: Exception | None = None

    async def commit(self):
        if self.error is not None:
            raise self.error
        self.commits += 1


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def file_storage() -> FakeFileStorage:
    return FakeFileStorage()


@pytest.fixture
def listing() -> ListingService:
    return ListingService(FakeListingRepository())


@pytest.fixture
def guard(store) -> OwnershipGuard:
    return OwnershipGuard(FakeOwnershipRepository(store))


@pytest.fixture
def cleanup(store, file_storage) -> AttachmentCleanup:
    return AttachmentCleanup(FakeFileRepository(store), file_storage)


@pytest.fixture
def client_repository(store) -> FakeClientRepository:
    return FakeClientRepository(store)


@pytest.fixture
def project_repository(store) -> FakeProjectRepository:
    return FakeProjectRepository(store)


@pytest.fixture
def codebase_repository(store) -> FakeCodebaseRepository:
    return FakeCodebaseRepository(store)


@pytest.fixture
def link_repository(store) -> FakeLinkRepository:
    return FakeLinkRepository(store)


@pytest.fixture
def file_repository(store) -> FakeFileRepository:
    return FakeFileRepository(store)


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def hasher() -> PlainPasswordHasher:
    return PlainPasswordHasher()


@pytest.fixture
def token_codec() -> FakeTokenCodec:
    return FakeTokenCodec()


@pytest.fixture
def unit_of_work() -> FakeUnitOfWork:
    return FakeUnitOfWork()
