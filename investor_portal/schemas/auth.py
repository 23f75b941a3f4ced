"""Schemas for authentication endpoints."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from investor_portal.constants import Role
from investor_portal.models.user import User


class LoginRequest(BaseModel):
    """Schema for the password step of login."""

    email: str  # Format checked in the router so the error message matches the login flow
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """Returned once the password is accepted and a code has been issued."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    temp_user_id: str = Field(alias="tempUserId")


class VerifyOtpRequest(BaseModel):
    """Schema for the one-time code step of login."""

    temp_user_id: str = Field(
        min_length=1, validation_alias=AliasChoices("tempUserId", "temp_user_id")
    )
    code: str = Field(min_length=1)


class UserInfo(BaseModel):
    """Schema for user info in auth responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str | None = None
    phone: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    profile_image_url: str | None = Field(default=None, alias="profileImageUrl")
    role: str = Role.INVESTOR

    @classmethod
    def from_user(cls, user: User, role: str) -> "UserInfo":
        return cls(
            id=user.id,
            email=user.email,
            phone=user.phone,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_image_url=user.profile_image_url,
            role=role,
        )


class VerifyOtpResponse(BaseModel):
    """Schema for a completed login."""

    user: UserInfo
    token: str


class MessageResponse(BaseModel):
    """Schema for simple message response."""

    message: str


class UserRoleResponse(BaseModel):
    """Role details for the current principal."""

    model_config = ConfigDict(populate_by_name=True)

    role: str
    admin_id: str | None = Field(default=None, alias="adminId")
    is_super_admin: bool = Field(default=False, alias="isSuperAdmin")
