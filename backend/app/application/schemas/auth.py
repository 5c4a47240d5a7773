"""Pydantic DTOs for signup, login and the current user profile."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, EmailStr, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from app.application.schemas.common import ApiModel
from app.application.schemas.fields import required_text

Email = Annotated[EmailStr, AfterValidator(lambda value: value.lower())]
Password = Annotated[str, Field(min_length=8, max_length=72)]
UserName = required_text(100, "Name is required.", "Name must be 100 characters or less.")


class SignupRequest(ApiModel):
    name: UserName
    email: Email
    password: Password


class LoginRequest(ApiModel):
    email: Email
    password: Password


class ProfileUpdateRequest(ApiModel):
    name: UserName


def _require(message: str):
    def _check(value: str) -> str:
        if not value:
            raise PydanticCustomError("required", message)
        return value

    return _check


def _check_new_password(value: str) -> str:
    if len(value) < 8:
        raise PydanticCustomError("too_short", "New password must be at least 8 characters.")
    if len(value) > 72:
        raise PydanticCustomError("too_long", "New password must be 72 characters or less.")
    return value


class PasswordChangeRequest(ApiModel):
    current_password: Annotated[str, AfterValidator(_require("Current password is required."))]
    new_password: Annotated[str, AfterValidator(_check_new_password)]
    confirm_password: Annotated[
        str, AfterValidator(_require("Please confirm your new password."))
    ]

    @field_validator("confirm_password")
    @classmethod
    def _matches_new_password(cls, value: str, info: ValidationInfo) -> str:
        new_password = info.data.get("new_password")
        if new_password is not None and value != new_password:
            raise PydanticCustomError("password_mismatch", "Passwords do not match.")
        return value


class UserResponse(ApiModel):
    id: str
    email: str
    name: str
    created_at: datetime
