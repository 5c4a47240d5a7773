"""Abstract interfaces (ports) for the authentication collaborators."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        ...


class SessionTokenCodec(ABC):
    """Issues and verifies the session token that identifies the caller."""

    @abstractmethod
    def issue(self, user_id: str) -> str:
        ...

    @abstractmethod
    def decode(self, token: str) -> str | None:
        """Return the user id carried by ``token``, or None if it is invalid or expired."""
        ...
