"""Audit trail for the login flow."""

import json
import logging

from fastapi import Request
from sqlalchemy.orm import Session

from investor_portal.models.security_audit_log import SecurityAuditLog

logger = logging.getLogger(__name__)

USER_AGENT_MAX_LENGTH = 500


class SecurityEventType:
    """Events recorded along password -> code -> session."""

    LOGIN_FAILED = "login_failed"  # password step rejected
    OTP_ISSUED = "otp_issued"
    OTP_FAILED = "otp_failed"  # wrong, expired or reused code
    LOGIN_SUCCESS = "login_success"  # session cookie issued
    LOGOUT = "logout"


class SecurityAuditService:
    """Writes audit rows and mirrors them to the application log."""

    @staticmethod
    def log_event(
        db: Session,
        event_type: str,
        user_id: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        details: dict | None = None,
    ) -> None:
        """Stage an audit row on ``db``.

        Nothing is committed here; the row lands with the caller's commit, so
        it shares the fate of the request's other writes.
        """
        db.add(
            SecurityAuditLog(
                user_id=user_id,
                event_type=event_type,
                ip_address=ip_address,
                user_agent=user_agent,
                details=json.dumps(details) if details else None,
            )
        )
        logger.info(f"Audit {event_type}: user={user_id} ip={ip_address}")

    @staticmethod
    def get_request_info(request: Request | None) -> tuple[str | None, str | None]:
        """Client address and user agent for an audit row.

        The address is informational only; rate limiting never reads it.
        """
        if request is None:
            return None, None

        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            ip_address = forwarded_for.split(",")[0].strip()
        else:
            ip_address = request.client.host if request.client else None

        user_agent = request.headers.get("User-Agent", "")[:USER_AGENT_MAX_LENGTH]
        return ip_address, user_agent
