"""Client CRUD endpoints."""

from fastapi import APIRouter, Depends, Request, status

from app.application.schemas import ApiResponse, ClientPayload, ClientResponse
from app.application.services import ClientService
from app.infrastructure.dependencies import get_client_service, get_current_user_id
from app.presentation.api.errors import parse_path_id, unavailable_on_failure
from app.presentation.api.responses import (
    CLIENT_MESSAGES as MSG,
    deleted_response,
    page_response,
)

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=None)
async def list_clients(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    service: ClientService = Depends(get_client_service),
) -> dict:
    """Paginated, searchable list of the caller's clients (``?dropdown=true`` for options)."""
    with unavailable_on_failure(MSG.list_error):
        page = await service.list_clients(user_id, request.query_params)
    return page_response(page, ClientResponse)


@router.get("/{client_id}", response_model=ApiResponse[ClientResponse])
async def get_client(
    client_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientResponse]:
    client_id = parse_path_id(client_id, "Client")
    with unavailable_on_failure(MSG.fetch_error):
        client = await service.get_client(user_id, client_id)
    return ApiResponse[ClientResponse](data=ClientResponse.model_validate(client))


@router.post(
    "",
    response_model=ApiResponse[ClientResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_client(
    data: ClientPayload,
    user_id: str = Depends(get_current_user_id),
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientResponse]:
    with unavailable_on_failure(MSG.create_error):
        client = await service.create_client(user_id, data)
    return ApiResponse[ClientResponse](
        data=ClientResponse.model_validate(client), message=MSG.created
    )


@router.put("/{client_id}", response_model=ApiResponse[ClientResponse])
async def update_client(
    client_id: str,
    data: ClientPayload,
    user_id: str = Depends(get_current_user_id),
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientResponse]:
    """Replace every editable field of a client."""
    client_id = parse_path_id(client_id, "Client")
    with unavailable_on_failure(MSG.update_error):
        client = await service.update_client(user_id, client_id, data)
    return ApiResponse[ClientResponse](
        data=ClientResponse.model_validate(client), message=MSG.updated
    )


@router.delete("/{client_id}", response_model=ApiResponse[None])
async def delete_client(
    client_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[None]:
    """Delete a client with its projects, codebases, links and files."""
    client_id = parse_path_id(client_id, "Client")
    with unavailable_on_failure(MSG.delete_error):
        await service.delete_client(user_id, client_id)
    return deleted_response(MSG.deleted)
