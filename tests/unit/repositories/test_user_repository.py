"""Tests for UserRepository."""

import pytest

from investor_portal.services.repositories import DuplicateError, NotFoundError
from investor_portal.services.repositories.user_repository import UserRepository


class TestUserRepository:
    """Test cases for UserRepository."""

    def test_find_by_id_returns_user(self, db, test_user):
        """Should return user when ID exists."""
        repo = UserRepository(db)
        user = repo.find_by_id(test_user.id)
        assert user is not None
        assert user.id == test_user.id

    def test_find_by_id_returns_none_for_missing(self, db):
        """Should return None when ID does not exist."""
        repo = UserRepository(db)
        assert repo.find_by_id("nonexistent-uuid-12345") is None

    def test_find_by_email_returns_user(self, db, test_user):
        """Should return user when email exists."""
        repo = UserRepository(db)
        user = repo.find_by_email("test@example.com")
        assert user is not None
        assert user.id == test_user.id

    def test_find_by_email_is_exact(self, db, test_user):
        """Should not match a differently cased email."""
        repo = UserRepository(db)
        assert repo.find_by_email("TEST@EXAMPLE.COM") is None

    def test_find_by_phone(self, db, test_user):
        repo = UserRepository(db)
        assert repo.find_by_phone("+15550001111").id == test_user.id
        assert repo.find_by_phone("+15559999999") is None

    def test_get_by_id_raises_for_missing(self, db):
        """Should raise NotFoundError when ID does not exist."""
        repo = UserRepository(db)
        with pytest.raises(NotFoundError) as exc_info:
            repo.get_by_id("missing")
        assert exc_info.value.entity_type == "User"
        assert exc_info.value.identifier == "missing"

    def test_create(self, db):
        repo = UserRepository(db)
        user = repo.create(email="new@example.com", password_hash="hash", first_name="New")
        db.commit()

        assert user.id is not None
        assert repo.get_by_id(user.id).first_name == "New"

    def test_create_duplicate_email(self, db, test_user):
        repo = UserRepository(db)
        with pytest.raises(DuplicateError) as exc_info:
            repo.create(email="test@example.com", password_hash="hash")
        assert exc_info.value.field == "email"

    def test_create_duplicate_phone(self, db, test_user):
        repo = UserRepository(db)
        with pytest.raises(DuplicateError) as exc_info:
            repo.create(email="other@example.com", password_hash="hash", phone="+15550001111")
        assert exc_info.value.field == "phone"

    def test_duplicate_error_message_names_field(self, db, test_user):
        repo = UserRepository(db)
        with pytest.raises(DuplicateError, match="User.email already registered"):
            repo.create(email="test@example.com", password_hash="hash")
