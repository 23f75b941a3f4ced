"""Admin membership data access layer."""

from sqlalchemy.orm import Session

from investor_portal.constants import Role
from investor_portal.models import AdminUser

from .exceptions import DuplicateError


class AdminUserRepository:
    """Data access for the ``admin_users`` table."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_user_id(self, user_id: str) -> AdminUser | None:
        """Find the admin row for a user, if any."""
        return self._db.query(AdminUser).filter(AdminUser.user_id == user_id).first()

    def create(
        self,
        user_id: str,
        role: str = Role.ADMIN,
        permissions: list[str] | None = None,
    ) -> AdminUser:
        """Add an admin row for ``user_id`` and flush it.

        Raises:
            DuplicateError: If the user already has an admin row.
            ValueError: If ``role`` is not an administrative role.
        """
        if role not in Role.ADMIN_ROLES:
            raise ValueError(f"Not an admin role: {role}")
        if self.find_by_user_id(user_id) is not None:
            raise DuplicateError("AdminUser", "user_id", user_id)

        admin = AdminUser(user_id=user_id, role=role, permissions=permissions or [])
        self._db.add(admin)
        self._db.flush()
        return admin
