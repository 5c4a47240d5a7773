"""Exception → envelope mapping for the whole API.

Handlers are registered once in ``create_app``; endpoints raise domain
exceptions and never build error responses themselves.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.application.schemas.common import ApiErrorResponse, format_validation_errors
from app.application.schemas.fields import IdStr
from app.domain.exceptions import (
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    ServiceUnavailableError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_id_adapter = TypeAdapter(IdStr)


def error_response(
    status_code: int, message: str, errors: dict[str, list[str]] | None = None
) -> JSONResponse:
    body = ApiErrorResponse(message=message, errors=errors or None)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def parse_path_id(raw: str, entity: str) -> str:
    """Trim and check a path id; raises ValidationError ``Invalid <entity> id.``."""
    try:
        return _id_adapter.validate_python(raw)
    except PydanticValidationError as exc:
        message = f"Invalid {entity.lower()} id."
        raise ValidationError(message, {"id": [message]}) from exc


@contextmanager
def unavailable_on_failure(message: str) -> Iterator[None]:
    """Turn store and filesystem failures into ``ServiceUnavailableError(message)``.

    Domain errors pass through untouched; the original exception is logged
    and chained but never reaches the client.
    """
    try:
        yield
    except DomainError:
        raise
    except (SQLAlchemyError, OSError) as exc:
        logger.exception(message)
        raise ServiceUnavailableError(message) from exc


def _is_json_decode_error(exc: RequestValidationError) -> bool:
    return any(error.get("type") == "json_invalid" for error in exc.errors())


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.errors)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    if _is_json_decode_error(exc):
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request payload.")

    errors = exc.errors()
    message = str(errors[0].get("msg")) if errors else "Invalid request payload."
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        message,
        format_validation_errors(errors, skip_prefix=("body", "query", "path")),
    )


async def _not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


async def _duplicate_handler(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    return error_response(
        status.HTTP_409_CONFLICT, exc.message, {exc.field: [exc.message]}
    )


async def _unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, exc.message)


async def _unavailable_handler(
    request: Request, exc: ServiceUnavailableError
) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed."
    return error_response(exc.status_code, message)


async def _unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong. Please try again."
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(EntityNotFoundError, _not_found_handler)
    app.add_exception_handler(DuplicateEntityError, _duplicate_handler)
    app.add_exception_handler(UnauthorizedError, _unauthorized_handler)
    app.add_exception_handler(ServiceUnavailableError, _unavailable_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_handler)
