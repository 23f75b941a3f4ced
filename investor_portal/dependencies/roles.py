"""Role tier guards built on the session dependency."""

from fastapi import Depends, HTTPException, status

from investor_portal.constants import Role
from investor_portal.dependencies.auth import get_current_principal
from investor_portal.services.auth_service import SessionPrincipal


def get_investor_principal(
    principal: SessionPrincipal = Depends(get_current_principal),
) -> SessionPrincipal:
    """Require the investor role."""
    if principal.role != Role.INVESTOR:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Investor access required",
        )
    return principal


def get_admin_principal(
    principal: SessionPrincipal = Depends(get_current_principal),
) -> SessionPrincipal:
    """Require admin privileges.

    Args:
        principal: The authenticated caller from get_current_principal.

    Returns:
        The principal if its role is admin or super_admin.

    Raises:
        HTTPException: If the principal is not an administrator.
    """
    if principal.role not in Role.ADMIN_ROLES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return principal


def get_super_admin_principal(
    principal: SessionPrincipal = Depends(get_current_principal),
) -> SessionPrincipal:
    """Require the super_admin role."""
    if principal.role != Role.SUPER_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Super admin access required",
        )
    return principal
