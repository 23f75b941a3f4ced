"""Pydantic schemas for API validation."""

from investor_portal.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UserInfo,
    UserRoleResponse,
    VerifyOtpRequest,
    VerifyOtpResponse,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "UserInfo",
    "UserRoleResponse",
    "VerifyOtpRequest",
    "VerifyOtpResponse",
]
