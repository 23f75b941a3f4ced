"""Create an investor account."""

import logging

from sqlalchemy.orm import Session as DBSession

from investor_portal.models import User
from investor_portal.services.auth_service import AuthService
from investor_portal.services.repositories import UserRepository

logger = logging.getLogger(__name__)

USAGE = "Usage: python -m scripts.create_investor <email> <password> [phone]"


def create_investor(
    db: DBSession,
    email: str,
    password: str,
    phone: str | None = None,
) -> User:
    """Create a user with no admin row, so it resolves to the investor role.

    Raises:
        DuplicateError: If the email or phone is already registered.
    """
    user = UserRepository(db).create(
        email=email,
        password_hash=AuthService.hash_password(password),
        phone=phone,
        first_name="Test",
        last_name="Investor",
    )
    db.commit()

    logger.info("Created investor: %s (id: %s)", email, user.id)
    return user


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
        user = create_investor(
            db,
            email=sys.argv[1],
            password=sys.argv[2],
            phone=sys.argv[3] if len(sys.argv) > 3 else None,
        )
        logger.info("")
        logger.info("Investor account created:")
        logger.info("  Email: %s", user.email)
        logger.info("  ID: %s", user.id)
    except Exception as e:
        logger.error("Error creating investor: %s", e)
        sys.exit(1)
    finally:
        db.close()
        database.dispose()
