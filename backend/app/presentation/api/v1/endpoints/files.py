"""File attachment endpoints: multipart upload, list, download and delete."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Request, Response, UploadFile, status

from app.application.schemas import ApiResponse, FileResponse
from app.application.services import FileService
from app.infrastructure.dependencies import get_current_user_id, get_file_service
from app.presentation.api.errors import parse_path_id, unavailable_on_failure
from app.presentation.api.responses import (
    FILE_MESSAGES as MSG,
    deleted_response,
    page_response,
)

router = APIRouter(prefix="/files", tags=["Files"])


@router.get("", response_model=None)
async def list_files(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    service: FileService = Depends(get_file_service),
) -> dict:
    """Uploaded files, filterable by their client/project/codebase tags."""
    with unavailable_on_failure(MSG.list_error):
        page = await service.list_files(user_id, request.query_params)
    return page_response(page, FileResponse)


@router.post(
    "",
    response_model=ApiResponse[FileResponse],
    status_code=status.HTTP_201_CREATED,
)
async def upload_file(
    file: UploadFile | None = None,
    client_id: str | None = Form(None, alias="clientId"),
    project_id: str | None = Form(None, alias="projectId"),
    codebase_id: str | None = Form(None, alias="codebaseId"),
    allowed_mime_types: str | None = Form(None, alias="allowedMimeTypes"),
    user_id: str = Depends(get_current_user_id),
    service: FileService = Depends(get_file_service),
) -> ApiResponse[FileResponse]:
    """Store one file; the scope tags are optional and checked for ownership."""
    content = await file.read() if file is not None else b""
    allowed = (
        [item.strip() for item in allowed_mime_types.split(",") if item.strip()]
        if allowed_mime_types
        else None
    )
    with unavailable_on_failure(MSG.create_error):
        attachment = await service.upload_file(
            user_id,
            filename=(file.filename if file is not None else None) or "untitled",
            content=content,
            content_type=file.content_type if file is not None else None,
            client_id=client_id,
            project_id=project_id,
            codebase_id=codebase_id,
            allowed_mime_types=allowed,
        )
    return ApiResponse[FileResponse](
        data=FileResponse.model_validate(attachment), message=MSG.created
    )


@router.get("/{file_id}")
async def download_file(
    file_id: str,
    user_id: str = Depends(get_current_user_id),
    service: FileService = Depends(get_file_service),
) -> Response:
    """Send the stored blob back as an attachment download."""
    file_id = parse_path_id(file_id, "File")
    with unavailable_on_failure(MSG.fetch_error):
        attachment, content = await service.download_file(user_id, file_id)
    return Response(
        content=content,
        media_type=attachment.mime_type,
        headers={
            "Content-Disposition": (
                f"attachment; filename*=UTF-8''{quote(attachment.filename)}"
            ),
        },
    )


@router.delete("/{file_id}", response_model=ApiResponse[None])
async def delete_file(
    file_id: str,
    user_id: str = Depends(get_current_user_id),
    service: FileService = Depends(get_file_service),
) -> ApiResponse[None]:
    file_id = parse_path_id(file_id, "File")
    with unavailable_on_failure(MSG.delete_error):
        await service.delete_file(user_id, file_id)
    return deleted_response(MSG.deleted)
