"""Fixtures for repository unit tests."""

import pytest

from investor_portal.models import User


@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def test_user(db):
    user = User(email="test@example.com", phone="+15550001111", password_hash="hash")
    db.add(user)
    db.commit()
    return user
