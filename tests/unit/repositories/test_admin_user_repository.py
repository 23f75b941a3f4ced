"""Tests for AdminUserRepository."""

import pytest

from investor_portal.constants import Role
from investor_portal.services.repositories import AdminUserRepository, DuplicateError


class TestAdminUserRepository:
    """Test cases for AdminUserRepository."""

    def test_find_by_user_id_returns_none_without_row(self, db, test_user):
        assert AdminUserRepository(db).find_by_user_id(test_user.id) is None

    def test_create_and_find(self, db, test_user):
        repo = AdminUserRepository(db)
        admin = repo.create(test_user.id, role=Role.SUPER_ADMIN, permissions=["all"])
        db.commit()

        found = repo.find_by_user_id(test_user.id)
        assert found.id == admin.id
        assert found.role == Role.SUPER_ADMIN
        assert found.permissions == ["all"]
        assert found.is_active is True

    def test_create_defaults_to_admin(self, db, test_user):
        admin = AdminUserRepository(db).create(test_user.id)
        assert admin.role == Role.ADMIN
        assert admin.permissions == []

    def test_create_rejects_investor_role(self, db, test_user):
        with pytest.raises(ValueError):
            AdminUserRepository(db).create(test_user.id, role=Role.INVESTOR)

    def test_create_twice_raises(self, db, test_user):
        repo = AdminUserRepository(db)
        repo.create(test_user.id)
        with pytest.raises(DuplicateError):
            repo.create(test_user.id)
