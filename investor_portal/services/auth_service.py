"""Authentication service for password hashing and session tokens."""

import hashlib
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache

import bcrypt
import jwt

from investor_portal.config import settings
from investor_portal.models.user import User

logger = logging.getLogger(__name__)

SESSION_TOKEN_TYPE = "session"


@dataclass(frozen=True)
class SessionPrincipal:
    """The authenticated caller, as carried by a session token."""

    id: str
    email: str | None
    role: str


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Same cost factor as real hashes so a miss takes as long as a hit
    return AuthService.hash_password("dummy-password-for-timing")


class AuthService:
    """Service for authentication operations."""

    @staticmethod
    def get_dummy_hash() -> str:
        """Get a dummy password hash for timing-consistent verification."""
        return _dummy_hash()

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError as e:
            logger.error(f"Password verification error: {e}")
            return False

    @staticmethod
    def verify_credentials(user: User | None, password: str) -> bool:
        """Check a password for a looked-up user.

        A missing user (or one without a password) still costs one bcrypt
        comparison, so response timing does not reveal whether the email exists.
        """
        if user is None or not user.password_hash:
            AuthService.verify_password(password, AuthService.get_dummy_hash())
            return False
        return AuthService.verify_password(password, user.password_hash)

    @staticmethod
    def hash_code(code: str) -> str:
        """Hash a one-time code using SHA-256."""
        return hashlib.sha256(code.encode("utf-8")).hexdigest()

    @staticmethod
    def create_session_token(
        user_id: str,
        email: str | None,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed session token."""
        if expires_delta is None:
            expires_delta = timedelta(days=settings.session_token_expire_days)

        now = datetime.now(UTC)
        payload = {
            "sub": user_id,
            "email": email,
            "role": role,
            "type": SESSION_TOKEN_TYPE,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    @staticmethod
    def decode_session_token(token: str) -> SessionPrincipal | None:
        """Decode and validate a session token.

        Returns None for a bad signature, a malformed or expired token, or a
        token that is not a session token.
        """
        try:
            payload = jwt.decode(
                token,
                settings.jwt_secret_key,
                algorithms=[settings.jwt_algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Session token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid session token: {e}")
            return None

        if payload.get("type") != SESSION_TOKEN_TYPE or not payload.get("role"):
            logger.debug("Token is not a session token")
            return None

        return SessionPrincipal(
            id=payload["sub"],
            email=payload.get("email"),
            role=payload["role"],
        )
