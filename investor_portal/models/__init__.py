"""SQLAlchemy ORM models."""

from investor_portal.models.admin_user import AdminUser
from investor_portal.models.one_time_passcode import OneTimePasscode
from investor_portal.models.security_audit_log import SecurityAuditLog
from investor_portal.models.user import User

__all__ = [
    "AdminUser",
    "OneTimePasscode",
    "SecurityAuditLog",
    "User",
]
