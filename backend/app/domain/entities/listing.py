"""Domain value objects shared by every list endpoint."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """The listable entity types, each with its own ownership chain."""

    CLIENT = "client"
    PROJECT = "project"
    CODEBASE = "codebase"
    LINK = "link"
    FILE = "file"


@dataclass(frozen=True)
class ListQuery:
    """Normalised pagination and search controls of a list request."""

    page: int = 1
    page_size: int = 10
    search: str = ""
    all: bool = False
    dropdown: bool = False


@dataclass(frozen=True)
class PageBounds:
    """Resolved fetch window. ``take`` is None when the fetch is unbounded."""

    skip: int
    take: int | None
    page: int
    page_size: int


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class ListFilters:
    """Cascading parent-id filters; None means the filter is not applied."""

    client_id: str | None = None
    project_id: str | None = None
    codebase_id: str | None = None


@dataclass(frozen=True)
class DropdownOption:
    """Minimal projection used to populate select inputs."""

    id: str
    name: str


@dataclass
class Page:
    items: list[Any] = field(default_factory=list)
    meta: PaginationMeta | None = None
