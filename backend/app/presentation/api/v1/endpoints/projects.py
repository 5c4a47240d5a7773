"""Project CRUD endpoints."""

from fastapi import APIRouter, Depends, Request, status

from app.application.schemas import ApiResponse, ProjectPayload, ProjectResponse
from app.application.services import ProjectService
from app.infrastructure.dependencies import get_project_service, get_current_user_id
from app.presentation.api.errors import parse_path_id, unavailable_on_failure
from app.presentation.api.responses import (
    PROJECT_MESSAGES as MSG,
    deleted_response,
    page_response,
)

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=None)
async def list_projects(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    """Projects of the caller's clients; ``clientId`` narrows to one client."""
    with unavailable_on_failure(MSG.list_error):
        page = await service.list_projects(user_id, request.query_params)
    return page_response(page, ProjectResponse)


@router.get("/{project_id}", response_model=ApiResponse[ProjectResponse])
async def get_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[ProjectResponse]:
    project_id = parse_path_id(project_id, "Project")
    with unavailable_on_failure(MSG.fetch_error):
        project = await service.get_project(user_id, project_id)
    return ApiResponse[ProjectResponse](data=ProjectResponse.model_validate(project))


@router.post(
    "",
    response_model=ApiResponse[ProjectResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    data: ProjectPayload,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[ProjectResponse]:
    with unavailable_on_failure(MSG.create_error):
        project = await service.create_project(user_id, data)
    return ApiResponse[ProjectResponse](
        data=ProjectResponse.model_validate(project), message=MSG.created
    )


@router.put("/{project_id}", response_model=ApiResponse[ProjectResponse])
async def update_project(
    project_id: str,
    data: ProjectPayload,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[ProjectResponse]:
    """Replace every editable field of a project."""
    project_id = parse_path_id(project_id, "Project")
    with unavailable_on_failure(MSG.update_error):
        project = await service.update_project(user_id, project_id, data)
    return ApiResponse[ProjectResponse](
        data=ProjectResponse.model_validate(project), message=MSG.updated
    )


@router.delete("/{project_id}", response_model=ApiResponse[None])
async def delete_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[None]:
    """Delete a project; its codebases, links and files go with it."""
    project_id = parse_path_id(project_id, "Project")
    with unavailable_on_failure(MSG.delete_error):
        await service.delete_project(user_id, project_id)
    return deleted_response(MSG.deleted)
