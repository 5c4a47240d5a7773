"""Shared Pydantic building blocks: camelCase base model, envelopes, pagination DTOs."""

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for every DTO — snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(ApiModel, Generic[T]):
    """Success envelope: ``{success: true, data, message?}``."""

    success: bool = True
    data: T | None = None
    message: str | None = None


class ApiErrorResponse(ApiModel):
    """Failure envelope: ``{success: false, message, errors?}``."""

    success: bool = False
    message: str
    errors: dict[str, list[str]] | None = None


class PaginationMetaSchema(ApiModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class PageSchema(ApiModel, Generic[T]):
    items: list[T]
    meta: PaginationMetaSchema


class DropdownOptionSchema(ApiModel):
    id: str
    name: str


def format_validation_errors(
    errors: Iterable[Mapping[str, Any]], *, skip_prefix: tuple[str, ...] = ()
) -> dict[str, list[str]]:
    """Group Pydantic error dicts by their first location element.

    Location prefixes such as ``"body"`` are dropped first; errors with no
    remaining location are filed under ``"form"``.
    """
    mapped: dict[str, list[str]] = {}
    for error in errors:
        loc = [part for part in error.get("loc", ()) if part not in skip_prefix]
        key = str(loc[0]) if loc else "form"
        if "_" in key:
            key = to_camel(key)
        mapped.setdefault(key, []).append(str(error.get("msg", "Invalid value.")))
    return mapped
