"""Tests for security audit logging."""

import json
import logging
from unittest.mock import MagicMock

from investor_portal.models import SecurityAuditLog
from investor_portal.services.security_audit_service import (
    SecurityAuditService,
    SecurityEventType,
)


def _request(headers: dict, host: str | None = "10.0.0.1"):
    request = MagicMock()
    request.headers = headers
    request.client = MagicMock(host=host) if host else None
    return request


def test_log_event_adds_row(db_session, caplog):
    with caplog.at_level(logging.INFO):
        SecurityAuditService.log_event(
            db_session,
            SecurityEventType.LOGIN_FAILED,
            ip_address="10.0.0.1",
            user_agent="pytest",
            details={"reason": "user_not_found"},
        )
    db_session.commit()

    entry = db_session.query(SecurityAuditLog).one()
    assert entry.event_type == "login_failed"
    assert entry.user_id is None
    assert json.loads(entry.details) == {"reason": "user_not_found"}
    assert "Audit login_failed: user=None ip=10.0.0.1" in caplog.text


def test_log_event_leaves_commit_to_caller(db_session):
    SecurityAuditService.log_event(db_session, SecurityEventType.LOGOUT)
    db_session.rollback()

    assert db_session.query(SecurityAuditLog).count() == 0


def test_get_request_info_prefers_forwarded_for():
    request = _request({"X-Forwarded-For": "203.0.113.7, 10.0.0.2", "User-Agent": "ua"})

    assert SecurityAuditService.get_request_info(request) == ("203.0.113.7", "ua")


def test_get_request_info_falls_back_to_client():
    request = _request({})

    assert SecurityAuditService.get_request_info(request) == ("10.0.0.1", "")


def test_get_request_info_truncates_user_agent():
    request = _request({"User-Agent": "x" * 600})

    _, user_agent = SecurityAuditService.get_request_info(request)

    assert len(user_agent) == 500


def test_get_request_info_without_request():
    assert SecurityAuditService.get_request_info(None) == (None, None)
