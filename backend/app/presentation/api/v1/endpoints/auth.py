"""Account endpoints — signup, cookie-based login/logout and the current profile."""

from fastapi import APIRouter, Depends, Response, status

from app.application.schemas import (
    ApiResponse,
    LoginRequest,
    PasswordChangeRequest,
    ProfileUpdateRequest,
    SignupRequest,
    UserResponse,
)
from app.application.services import AuthService
from app.config import get_settings
from app.infrastructure.dependencies import get_auth_service, get_current_user_id
from app.presentation.api.errors import unavailable_on_failure

router = APIRouter(prefix="/auth", tags=["Auth"])


def _set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.jwt_expires_hours * 3600,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )


@router.post(
    "/signup",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    data: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[UserResponse]:
    with unavailable_on_failure("Unable to create your account right now."):
        user = await service.signup(data)
    return ApiResponse[UserResponse](
        data=UserResponse.model_validate(user),
        message="Account created successfully. Please log in.",
    )


@router.post("/login", response_model=ApiResponse[UserResponse])
async def login(
    data: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[UserResponse]:
    """Verify credentials and set the HTTP-only session cookie."""
    with unavailable_on_failure("Unable to log in right now."):
        user, token = await service.login(data)
    _set_session_cookie(response, token)
    return ApiResponse[UserResponse](
        data=UserResponse.model_validate(user), message="Logged in successfully."
    )


@router.post("/logout", response_model=ApiResponse[None])
async def logout(response: Response) -> ApiResponse[None]:
    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    return ApiResponse[None](message="Logged out successfully.")


@router.get("/me", response_model=ApiResponse[UserResponse])
async def me(
    user_id: str = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[UserResponse]:
    with unavailable_on_failure("Unable to fetch profile right now."):
        user = await service.get_profile(user_id)
    return ApiResponse[UserResponse](data=UserResponse.model_validate(user))


@router.put("/profile", response_model=ApiResponse[UserResponse])
async def update_profile(
    data: ProfileUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[UserResponse]:
    with unavailable_on_failure("Unable to update profile right now."):
        user = await service.update_profile(user_id, data)
    return ApiResponse[UserResponse](
        data=UserResponse.model_validate(user), message="Profile updated successfully."
    )


@router.put("/password", response_model=ApiResponse[None])
async def change_password(
    data: PasswordChangeRequest,
    user_id: str = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[None]:
    """Change the password after re-checking the current one."""
    with unavailable_on_failure("Unable to change password right now."):
        await service.change_password(user_id, data)
    return ApiResponse[None](message="Password changed successfully.")
