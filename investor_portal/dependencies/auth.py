"""Session authentication dependencies for protected routes."""

from fastapi import HTTPException, Request, status

from investor_portal.config import settings
from investor_portal.services.auth_service import AuthService, SessionPrincipal


def get_current_principal(request: Request) -> SessionPrincipal:
    """
    Authenticate the request from its session cookie.

    The principal is also stored on ``request.state.principal``.

    Usage:
        @router.get("/protected")
        def protected_route(principal: SessionPrincipal = Depends(get_current_principal)):
            return {"user_id": principal.id}
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    principal = AuthService.decode_session_token(token)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session",
        )

    request.state.principal = principal
    return principal


def get_optional_principal(request: Request) -> SessionPrincipal | None:
    """
    Get the current principal if authenticated, None otherwise.
    Useful for routes that work with or without a session.
    """
    try:
        return get_current_principal(request)
    except HTTPException:
        return None
