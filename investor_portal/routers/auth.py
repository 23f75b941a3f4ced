"""Authentication router: password step, one-time code step and session."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from investor_portal.config import settings
from investor_portal.constants import OtpChannel, Role
from investor_portal.database import get_db
from investor_portal.dependencies.auth import get_current_principal, get_optional_principal
from investor_portal.rate_limiter import limiter
from investor_portal.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UserInfo,
    UserRoleResponse,
    VerifyOtpRequest,
    VerifyOtpResponse,
)
from investor_portal.services.auth import (
    AuthService,
    OtpService,
    RoleService,
    SecurityAuditService,
    SecurityEventType,
    SessionPrincipal,
)
from investor_portal.services.repositories import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


def _cookie_flags() -> dict:
    """Cross-site cookies in production (SPA on another origin), Lax otherwise."""
    if settings.is_production:
        return {"httponly": True, "secure": True, "samesite": "none"}
    return {"httponly": True, "secure": False, "samesite": "lax"}


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_token_expire_days * 24 * 60 * 60,
        **_cookie_flags(),
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.session_cookie_name, **_cookie_flags())


@router.post("/login", response_model=LoginResponse)
@limiter.limit("5/minute")
def login(request: Request, data: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    """Check email and password, then send a one-time code."""
    if "@" not in data.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Valid email is required",
        )

    ip_address, user_agent = SecurityAuditService.get_request_info(request)

    user = UserRepository(db).find_by_email(data.email)
    if not AuthService.verify_credentials(user, data.password):
        SecurityAuditService.log_event(
            db, SecurityEventType.LOGIN_FAILED,
            user_id=user.id if user else None,
            ip_address=ip_address, user_agent=user_agent,
            details={
                "email": data.email,
                "reason": "invalid_password" if user else "user_not_found",
            },
        )
        db.commit()
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    OtpService(db).issue(user.id, user.email, OtpChannel.EMAIL)
    SecurityAuditService.log_event(
        db, SecurityEventType.OTP_ISSUED, user_id=user.id,
        ip_address=ip_address, user_agent=user_agent,
        details={"channel": OtpChannel.EMAIL},
    )
    db.commit()

    logger.info(f"Password accepted, OTP issued: {user.email}")
    return LoginResponse(message="OTP sent successfully", temp_user_id=user.id)


@router.post("/verify-otp", response_model=VerifyOtpResponse)
@limiter.limit("10/minute")
def verify_otp(
    request: Request,
    response: Response,
    data: VerifyOtpRequest,
    db: Session = Depends(get_db),
) -> VerifyOtpResponse:
    """Consume a one-time code and start a session."""
    ip_address, user_agent = SecurityAuditService.get_request_info(request)
    users = UserRepository(db)

    if not OtpService(db).verify(data.temp_user_id, data.code):
        known_user = users.find_by_id(data.temp_user_id)
        SecurityAuditService.log_event(
            db, SecurityEventType.OTP_FAILED,
            user_id=known_user.id if known_user else None,
            ip_address=ip_address, user_agent=user_agent,
        )
        db.commit()
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired OTP",
        )

    user = users.find_by_id(data.temp_user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    role = RoleService(db).resolve_role(user.id)
    token = AuthService.create_session_token(user.id, user.email, role)

    SecurityAuditService.log_event(
        db, SecurityEventType.LOGIN_SUCCESS, user_id=user.id,
        ip_address=ip_address, user_agent=user_agent,
        details={"role": role},
    )
    db.commit()

    set_session_cookie(response, token)
    logger.info(f"User logged in: {user.email} ({role})")
    return VerifyOtpResponse(user=UserInfo.from_user(user, role), token=token)


@router.get("/auth/user", response_model=UserInfo)
def get_me(
    principal: SessionPrincipal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> UserInfo:
    """Get the current user with a freshly resolved role."""
    user = UserRepository(db).find_by_id(principal.id)
    if user is None:
        # Token outlived its principal
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session",
        )
    return UserInfo.from_user(user, RoleService(db).resolve_role(user.id))


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    principal: SessionPrincipal | None = Depends(get_optional_principal),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Clear the session cookie."""
    if principal is not None:
        ip_address, user_agent = SecurityAuditService.get_request_info(request)
        SecurityAuditService.log_event(
            db, SecurityEventType.LOGOUT, user_id=principal.id,
            ip_address=ip_address, user_agent=user_agent,
        )
        db.commit()

    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/user/role", response_model=UserRoleResponse)
def get_user_role(
    principal: SessionPrincipal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> UserRoleResponse:
    """Get the current principal's role and admin membership."""
    admin = RoleService(db).find_admin(principal.id)
    if admin is None:
        return UserRoleResponse(role=Role.INVESTOR)
    return UserRoleResponse(
        role=admin.role,
        admin_id=admin.id,
        is_super_admin=admin.role == Role.SUPER_ADMIN,
    )
