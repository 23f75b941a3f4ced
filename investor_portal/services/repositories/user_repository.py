"""User data access layer."""

import logging

from sqlalchemy.orm import Session

from investor_portal.models import User

from .exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


class UserRepository:
    """Centralized user data access.

    Naming conventions:
    - find_* : Query that may return None
    - get_* : Query that raises exception if missing
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, user_id: str) -> User | None:
        """Find user by primary key."""
        return self._db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> User | None:
        """Find user by email (exact match)."""
        return self._db.query(User).filter(User.email == email).first()

    def find_by_phone(self, phone: str) -> User | None:
        """Find user by phone number."""
        return self._db.query(User).filter(User.phone == phone).first()

    def get_by_id(self, user_id: str) -> User:
        """Get user by ID or raise NotFoundError."""
        user = self.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def create(
        self,
        email: str,
        password_hash: str,
        phone: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        """Add a new user to the session and flush it.

        Raises:
            DuplicateError: If the email or phone is already registered.
        """
        if self.find_by_email(email) is not None:
            raise DuplicateError("User", "email", email)
        if phone and self.find_by_phone(phone) is not None:
            raise DuplicateError("User", "phone", phone)

        user = User(
            email=email,
            phone=phone,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )
        self._db.add(user)
        self._db.flush()
        logger.debug("Created user %s", user.id)
        return user
