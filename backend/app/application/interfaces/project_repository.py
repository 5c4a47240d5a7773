"""Abstract repository interface (port) for Project persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Project


class ProjectRepository(ABC):
    """Port for project persistence, scoped through the owning client."""

    @abstractmethod
    async def get(self, user_id: str, project_id: str) -> Project | None:
        ...

    @abstractmethod
    async def create(self, project: Project) -> Project:
        ...

    @abstractmethod
    async def update(self, user_id: str, project: Project) -> bool:
        """Write the editable fields. Returns False when no owned row matched."""
        ...

    @abstractmethod
    async def delete(self, user_id: str, project_id: str) -> bool:
        ...
