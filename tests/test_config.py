"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from investor_portal.config import Settings


def test_missing_jwt_secret_is_fatal(monkeypatch):
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

    with pytest.raises(ValidationError, match="jwt_secret_key"):
        Settings(_env_file=None)


def test_empty_jwt_secret_is_fatal(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_missing_database_url_is_fatal(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError, match="database_url"):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    for name in (
        "BCRYPT_ROUNDS", "ENVIRONMENT", "OTP_EXPIRY_MINUTES",
        "SESSION_TOKEN_EXPIRE_DAYS", "SESSION_COOKIE_NAME",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.jwt_algorithm == "HS256"
    assert settings.session_token_expire_days == 7
    assert settings.session_cookie_name == "token"
    assert settings.otp_expiry_minutes == 10
    assert settings.bcrypt_rounds == 10
    assert settings.is_production is False


def test_production_flag(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "Production")

    assert Settings(_env_file=None).is_production is True
