"""Reusable annotated field types with user-facing validation messages."""

from typing import Annotated, Any
from urllib.parse import urlparse

from pydantic import AfterValidator, BeforeValidator, StringConstraints
from pydantic_core import PydanticCustomError

ID_MAX_LENGTH = 64


def _blank_to_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        trimmed = value.strip()
        return trimmed or None
    return value


def _check_id(value: str) -> str:
    if not value or len(value) > ID_MAX_LENGTH:
        raise PydanticCustomError("invalid_id", "Invalid id.")
    return value


IdStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True),
    AfterValidator(_check_id),
]
"""A trimmed, 1-64 character identifier."""

OptionalId = Annotated[IdStr | None, BeforeValidator(_blank_to_none)]
"""An identifier where blank or missing means "not set"."""


def required_text(max_length: int, required: str, too_long: str) -> Any:
    """Trimmed non-empty string of at most ``max_length`` characters."""

    def _check(value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("required", required)
        if len(value) > max_length:
            raise PydanticCustomError("too_long", too_long)
        return value

    return Annotated[str, AfterValidator(_check)]


def nullable_text(max_length: int, too_long: str) -> Any:
    """Trimmed optional string; blank becomes None."""

    def _check(value: str | None) -> str | None:
        if value is not None and len(value) > max_length:
            raise PydanticCustomError("too_long", too_long)
        return value

    return Annotated[str | None, BeforeValidator(_blank_to_none), AfterValidator(_check)]


def nullable_int(minimum: int, maximum: int, too_small: str, too_large: str) -> Any:
    """Optional whole number within ``[minimum, maximum]``; ``""`` becomes None."""

    def _coerce(value: Any) -> Any:
        if value is None or value == "":
            return None
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                raise PydanticCustomError("whole_number", "Must be a whole number.") from None
        if isinstance(value, float):
            if not value.is_integer():
                raise PydanticCustomError("whole_number", "Must be a whole number.")
            return int(value)
        return value

    def _check(value: int | None) -> int | None:
        if value is None:
            return None
        if value < minimum:
            raise PydanticCustomError("too_small", too_small)
        if value > maximum:
            raise PydanticCustomError("too_large", too_large)
        return value

    return Annotated[int | None, BeforeValidator(_coerce), AfterValidator(_check)]


def _check_http_url(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("required", "Link URL is required.")
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise PydanticCustomError(
            "url", "Enter a valid URL including http:// or https://."
        )
    if parsed.scheme.lower() not in ("http", "https"):
        raise PydanticCustomError("url_scheme", "Only http:// or https:// URLs are allowed.")
    return value


HttpUrlStr = Annotated[str, AfterValidator(_check_http_url)]
