"""Request bodies for account and admin user endpoints."""

from typing import Optional

from pydantic import Field

from .base import RequestSchema, RequiredStr, Secret


class UserIdRequest(RequestSchema):
    user_id: int = Field(alias="userId")


class AdminUpdateUserRequest(UserIdRequest):
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    daily_rate: Optional[float] = Field(default=None, ge=0)


class ChangePasswordRequest(UserIdRequest):
    old_password: Secret = Field(alias="oldPassword")
    new_password: Secret = Field(alias="newPassword")


class ChangeProfileRequest(UserIdRequest):
    full_name: RequiredStr = Field(alias="fullName")
    phone_number: RequiredStr = Field(alias="phoneNumber")


class ChangeLocationRequest(UserIdRequest):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    is_working: Optional[bool] = Field(default=None, alias="isWorking")
