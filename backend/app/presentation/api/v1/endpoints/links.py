"""Link CRUD endpoints."""

from fastapi import APIRouter, Depends, Request, status

from app.application.schemas import ApiResponse, LinkPayload, LinkResponse
from app.application.services import LinkService
from app.infrastructure.dependencies import get_link_service, get_current_user_id
from app.presentation.api.errors import parse_path_id, unavailable_on_failure
from app.presentation.api.responses import (
    LINK_MESSAGES as MSG,
    deleted_response,
    page_response,
)

router = APIRouter(prefix="/links", tags=["Links"])


@router.get("", response_model=None)
async def list_links(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> dict:
    with unavailable_on_failure(MSG.list_error):
        page = await service.list_links(user_id, request.query_params)
    return page_response(page, LinkResponse)


@router.get("/{link_id}", response_model=ApiResponse[LinkResponse])
async def get_link(
    link_id: str,
    user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> ApiResponse[LinkResponse]:
    link_id = parse_path_id(link_id, "Link")
    with unavailable_on_failure(MSG.fetch_error):
        link = await service.get_link(user_id, link_id)
    return ApiResponse[LinkResponse](data=LinkResponse.model_validate(link))


@router.post(
    "",
    response_model=ApiResponse[LinkResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_link(
    data: LinkPayload,
    user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> ApiResponse[LinkResponse]:
    with unavailable_on_failure(MSG.create_error):
        link = await service.create_link(user_id, data)
    return ApiResponse[LinkResponse](
        data=LinkResponse.model_validate(link), message=MSG.created
    )


@router.put("/{link_id}", response_model=ApiResponse[LinkResponse])
async def update_link(
    link_id: str,
    data: LinkPayload,
    user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> ApiResponse[LinkResponse]:
    """Replace every editable field of a link."""
    link_id = parse_path_id(link_id, "Link")
    with unavailable_on_failure(MSG.update_error):
        link = await service.update_link(user_id, link_id, data)
    return ApiResponse[LinkResponse](
        data=LinkResponse.model_validate(link), message=MSG.updated
    )


@router.delete("/{link_id}", response_model=ApiResponse[None])
async def delete_link(
    link_id: str,
    user_id: str = Depends(get_current_user_id),
    service: LinkService = Depends(get_link_service),
) -> ApiResponse[None]:
    link_id = parse_path_id(link_id, "Link")
    with unavailable_on_failure(MSG.delete_error):
        await service.delete_link(user_id, link_id)
    return deleted_response(MSG.deleted)
