"""Create an administrator account."""

import logging

from sqlalchemy.orm import Session as DBSession

from investor_portal.constants import Role
from investor_portal.models import AdminUser, User
from investor_portal.services.auth_service import AuthService
from investor_portal.services.repositories import AdminUserRepository, UserRepository

logger = logging.getLogger(__name__)

USAGE = "Usage: python -m scripts.create_admin <email> <password> [role] [phone]"


def create_admin(
    db: DBSession,
    email: str,
    password: str,
    role: str = Role.SUPER_ADMIN,
    phone: str | None = None,
) -> tuple[User, AdminUser]:
    """
    Create a user and give it an administrative role.

    Args:
        db: Database session
        email: Login email
        password: Plaintext password, stored as a bcrypt hash
        role: ``admin`` or ``super_admin``
        phone: Optional phone number

    Returns:
        Tuple of (User, AdminUser)

    Raises:
        DuplicateError: If the email or phone is already registered.
        ValueError: If ``role`` is not an administrative role.
    """
    if role not in Role.ADMIN_ROLES:
        raise ValueError(f"Role must be one of {', '.join(Role.ADMIN_ROLES)}")

    user = UserRepository(db).create(
        email=email,
        password_hash=AuthService.hash_password(password),
        phone=phone,
        first_name="System",
        last_name="Admin",
    )
    permissions = ["all"] if role == Role.SUPER_ADMIN else []
    admin = AdminUserRepository(db).create(user.id, role=role, permissions=permissions)
    db.commit()

    logger.info("Created %s: %s (id: %s)", role, email, user.id)
    return user, admin


if __name__ == "__main__":
    """Run as standalone script."""
    import sys

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if len(sys.argv) < 3:
        logger.error(USAGE)
        sys.exit(1)

    from investor_portal.config import settings
    from investor_portal.database import Database

    database = Database(settings.database_url)
    db = database.session_factory()
    try:
        args = sys.argv[1:]
        user, admin = create_admin(
            db,
            email=args[0],
            password=args[1],
            role=args[2] if len(args) > 2 else Role.SUPER_ADMIN,
            phone=args[3] if len(args) > 3 else None,
        )
        logger.info("")
        logger.info("Admin account created:")
        logger.info("  Email: %s", user.email)
        logger.info("  ID: %s", user.id)
        logger.info("  Role: %s", admin.role)
    except Exception as e:
        logger.error("Error creating admin: %s", e)
        sys.exit(1)
    finally:
        db.close()
        database.dispose()
