"""Shared test fixtures."""

import os

# Settings are read on import; required values must be present first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-bytes-0123456789")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("SENDGRID_API_KEY", "")

from unittest.mock import patch  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from investor_portal.constants import Role  # noqa: E402
from investor_portal.database import Database  # noqa: E402
from investor_portal.main import create_app  # noqa: E402
from investor_portal.models import AdminUser, User  # noqa: E402
from investor_portal.rate_limiter import limiter  # noqa: E402
from investor_portal.services.auth_service import AuthService  # noqa: E402

TEST_PASSWORD = "Correct-Horse-9"


def create_user(
    db_session_maker,
    email: str = "investor@example.com",
    password: str = TEST_PASSWORD,
    role: str = Role.INVESTOR,
    phone: str | None = None,
) -> str:
    """Helper to insert a user (plus an admin row for admin roles). Returns the user id."""
    db = db_session_maker()
    user = User(
        email=email,
        phone=phone,
        password_hash=AuthService.hash_password(password),
        first_name="Ada",
        last_name="Lovelace",
    )
    db.add(user)
    db.flush()
    if role in Role.ADMIN_ROLES:
        db.add(AdminUser(user_id=user.id, role=role, permissions=[]))
    db.commit()
    user_id = user.id
    db.close()
    return user_id


def login_and_capture_code(test_client: TestClient, email: str, password: str = TEST_PASSWORD):
    """Helper to post credentials and capture the code handed to the email sender.

    Returns (response, code); code is None when nothing was sent.
    """
    with patch(
        "investor_portal.services.notification_service.EmailService.send_otp_email",
        return_value=True,
    ) as mock_send:
        response = test_client.post(
            "/api/login",
            json={"email": email, "password": password},
        )
    code = mock_send.call_args.args[1] if mock_send.called else None
    return response, code


def log_in(test_client: TestClient, email: str, password: str = TEST_PASSWORD):
    """Helper to run both login steps. The client keeps the session cookie."""
    response, code = login_and_capture_code(test_client, email, password)
    return test_client.post(
        "/api/verify-otp",
        json={"tempUserId": response.json()["tempUserId"], "code": code},
    )


@pytest.fixture
def database():
    """Create in-memory SQLite database for testing."""
    database = Database("sqlite://", poolclass=StaticPool)
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def db_session(database):
    """Session bound to the in-memory database."""
    session = database.session_factory()
    yield session
    session.close()


@pytest.fixture
def auth_client(database):
    """Create test client around an in-memory database.

    Yields a tuple of (TestClient, SessionMaker) for use in tests.
    """
    limiter.reset()

    app = create_app(database)

    with TestClient(app) as test_client:
        yield test_client, database.session_factory
