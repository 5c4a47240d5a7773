"""Codebase CRUD endpoints."""

from fastapi import APIRouter, Depends, Request, status

from app.application.schemas import ApiResponse, CodebasePayload, CodebaseResponse
from app.application.services import CodebaseService
from app.infrastructure.dependencies import get_codebase_service, get_current_user_id
from app.presentation.api.errors import parse_path_id, unavailable_on_failure
from app.presentation.api.responses import (
    CODEBASE_MESSAGES as MSG,
    deleted_response,
    page_response,
)

router = APIRouter(prefix="/codebases", tags=["Codebases"])


@router.get("", response_model=None)
async def list_codebases(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    service: CodebaseService = Depends(get_codebase_service),
) -> dict:
    """Codebases filtered by ``clientId`` and ``projectId``."""
    with unavailable_on_failure(MSG.list_error):
        page = await service.list_codebases(user_id, request.query_params)
    return page_response(page, CodebaseResponse)


@router.get("/{codebase_id}", response_model=ApiResponse[CodebaseResponse])
async def get_codebase(
    codebase_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CodebaseService = Depends(get_codebase_service),
) -> ApiResponse[CodebaseResponse]:
    codebase_id = parse_path_id(codebase_id, "Codebase")
    with unavailable_on_failure(MSG.fetch_error):
        codebase = await service.get_codebase(user_id, codebase_id)
    return ApiResponse[CodebaseResponse](data=CodebaseResponse.model_validate(codebase))


@router.post(
    "",
    response_model=ApiResponse[CodebaseResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_codebase(
    data: CodebasePayload,
    user_id: str = Depends(get_current_user_id),
    service: CodebaseService = Depends(get_codebase_service),
) -> ApiResponse[CodebaseResponse]:
    with unavailable_on_failure(MSG.create_error):
        codebase = await service.create_codebase(user_id, data)
    return ApiResponse[CodebaseResponse](
        data=CodebaseResponse.model_validate(codebase), message=MSG.created
    )


@router.put("/{codebase_id}", response_model=ApiResponse[CodebaseResponse])
async def update_codebase(
    codebase_id: str,
    data: CodebasePayload,
    user_id: str = Depends(get_current_user_id),
    service: CodebaseService = Depends(get_codebase_service),
) -> ApiResponse[CodebaseResponse]:
    """Replace a codebase. Moving it to another project moves its links too."""
    codebase_id = parse_path_id(codebase_id, "Codebase")
    with unavailable_on_failure(MSG.update_error):
        codebase = await service.update_codebase(user_id, codebase_id, data)
    return ApiResponse[CodebaseResponse](
        data=CodebaseResponse.model_validate(codebase), message=MSG.updated
    )


@router.delete("/{codebase_id}", response_model=ApiResponse[None])
async def delete_codebase(
    codebase_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CodebaseService = Depends(get_codebase_service),
) -> ApiResponse[None]:
    """Delete a codebase; its links lose the codebase reference."""
    codebase_id = parse_path_id(codebase_id, "Codebase")
    with unavailable_on_failure(MSG.delete_error):
        await service.delete_codebase(user_id, codebase_id)
    return deleted_response(MSG.deleted)
