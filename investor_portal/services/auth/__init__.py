"""Authentication and authorization services.

Handles credential checks, one-time codes, session tokens, roles and
security audit logging.
"""

from investor_portal.services.auth_service import AuthService, SessionPrincipal
from investor_portal.services.otp_service import OtpService
from investor_portal.services.role_service import RoleService
from investor_portal.services.security_audit_service import (
    SecurityAuditService,
    SecurityEventType,
)

__all__ = [
    "AuthService",
    "OtpService",
    "RoleService",
    "SecurityAuditService",
    "SecurityEventType",
    "SessionPrincipal",
]
