"""Domain-specific exceptions — framework-independent.

The presentation layer maps each of these onto an HTTP status and the
standard ``{success: false, message, errors?}`` envelope.
"""


class DomainError(Exception):
    """Base class for every failure the API reports to the caller."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist or is not owned by the caller.

    Both cases produce the same message so other tenants' ids never leak.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: str | None = None,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type} not found.")


class DuplicateEntityError(DomainError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str, message: str | None = None):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(message or f"{entity_type} with {field}='{value}' already exists")


class ValidationError(DomainError):
    """Raised for malformed filters or payloads.

    ``errors`` maps a field name to its messages so the UI can annotate
    individual inputs.
    """

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None):
        self.errors = errors or {}
        super().__init__(message)


class UnauthorizedError(DomainError):
    """Raised when the request carries no valid session."""

    def __init__(self, message: str = "Unauthorized."):
        super().__init__(message)


class ServiceUnavailableError(DomainError):
    """Raised when the store or the filesystem fails unexpectedly.

    The message is a generic "Unable to <verb> <noun> right now." string;
    the underlying exception is chained, never shown to the client.
    """
