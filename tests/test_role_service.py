"""Tests for role resolution."""

from investor_portal.constants import Role
from investor_portal.services.role_service import RoleService
from tests.conftest import create_user


def test_no_admin_row_is_investor(database, db_session):
    user_id = create_user(database.session_factory)

    assert RoleService(db_session).resolve_role(user_id) == Role.INVESTOR


def test_admin_row_role(database, db_session):
    user_id = create_user(database.session_factory, email="admin@example.com", role=Role.ADMIN)

    assert RoleService(db_session).resolve_role(user_id) == Role.ADMIN


def test_super_admin_row_role(database, db_session):
    user_id = create_user(database.session_factory, email="root@example.com", role=Role.SUPER_ADMIN)

    assert RoleService(db_session).resolve_role(user_id) == Role.SUPER_ADMIN


def test_unknown_user_is_investor(db_session):
    assert RoleService(db_session).resolve_role("no-such-user") == Role.INVESTOR


def test_find_admin(database, db_session):
    admin_id = create_user(database.session_factory, email="admin@example.com", role=Role.ADMIN)
    investor_id = create_user(database.session_factory)

    service = RoleService(db_session)
    assert service.find_admin(admin_id).user_id == admin_id
    assert service.find_admin(investor_id) is None
