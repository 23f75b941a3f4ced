"""Role resolution from admin membership."""

from sqlalchemy.orm import Session

from investor_portal.constants import Role
from investor_portal.models import AdminUser
from investor_portal.services.repositories import AdminUserRepository


class RoleService:
    """Decides which role a principal holds."""

    def __init__(self, db: Session) -> None:
        self._admins = AdminUserRepository(db)

    def find_admin(self, user_id: str) -> AdminUser | None:
        """Return the admin row for ``user_id``, if any."""
        return self._admins.find_by_user_id(user_id)

    def resolve_role(self, user_id: str) -> str:
        """Return the admin row's role, or ``investor`` when there is none."""
        admin = self.find_admin(user_id)
        if admin is None:
            return Role.INVESTOR
        return admin.role
