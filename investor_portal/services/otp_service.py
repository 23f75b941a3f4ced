"""One-time passcode issuance and verification."""

import logging
import secrets
from datetime import UTC, datetime, timedelta

from sqlalchemy import update
from sqlalchemy.orm import Session

from investor_portal.config import settings
from investor_portal.constants import OtpChannel
from investor_portal.models import OneTimePasscode, User
from investor_portal.services.auth_service import AuthService
from investor_portal.services.notification_service import (
    NotificationSender,
    default_code_senders,
)

logger = logging.getLogger(__name__)

CODE_MIN = 100000
CODE_SPAN = 900000


class OtpService:
    """Issues and consumes six-digit login codes.

    Only the SHA-256 hash of a code is stored. Issuing a code retires every
    earlier unused code of the same user, so at most one is live at a time.
    """

    def __init__(
        self,
        db: Session,
        senders: dict[str, NotificationSender] | None = None,
        expiry_minutes: int | None = None,
    ) -> None:
        self._db = db
        self._senders = senders if senders is not None else default_code_senders()
        self._expiry = timedelta(
            minutes=expiry_minutes if expiry_minutes is not None else settings.otp_expiry_minutes
        )

    @staticmethod
    def generate_code() -> str:
        """Return a uniformly random code in 100000..999999."""
        return str(CODE_MIN + secrets.randbelow(CODE_SPAN))

    def issue(self, user_id: str, destination: str, channel: str = OtpChannel.EMAIL) -> str:
        """Create, store and deliver a new code for ``user_id``.

        Delivery is best effort: failures are logged and the code is still
        valid, since it was also written to the log.

        Raises:
            ValueError: If ``channel`` has no sender.
        """
        sender = self._senders.get(channel)
        if sender is None:
            raise ValueError(f"Unsupported OTP channel: {channel}")

        code = self.generate_code()
        now = datetime.now(UTC)

        # Serialize concurrent issuances for the same user
        self._db.query(User.id).filter(User.id == user_id).with_for_update().first()
        self._db.execute(
            update(OneTimePasscode)
            .where(
                OneTimePasscode.user_id == user_id,
                OneTimePasscode.is_used.is_(False),
            )
            .values(is_used=True)
            .execution_options(synchronize_session=False)
        )
        self._db.add(
            OneTimePasscode(
                user_id=user_id,
                code_hash=AuthService.hash_code(code),
                channel=channel,
                created_at=now,
                expires_at=now + self._expiry,
            )
        )
        self._db.commit()
        # Bulk updates bypass the identity map
        self._db.expire_all()

        logger.info("[OTP] User: %s, Channel: %s, Code: %s", user_id, channel, code)

        try:
            delivered = sender.send_code(destination, code)
        except Exception:
            logger.exception("OTP delivery via %s raised for user %s", channel, user_id)
        else:
            if not delivered:
                logger.warning("OTP delivery via %s failed for user %s", channel, user_id)

        return code

    def verify(self, user_id: str, code: str) -> bool:
        """Consume ``code`` if it is the user's live code.

        Wrong, expired and already-used codes all return False.
        """
        record = (
            self._db.query(OneTimePasscode)
            .filter(
                OneTimePasscode.user_id == user_id,
                OneTimePasscode.code_hash == AuthService.hash_code(code),
                OneTimePasscode.is_used.is_(False),
                OneTimePasscode.expires_at > datetime.now(UTC),
            )
            .order_by(OneTimePasscode.created_at.desc())
            .first()
        )
        if record is None:
            return False

        # Only one of two concurrent submissions flips the flag
        result = self._db.execute(
            update(OneTimePasscode)
            .where(
                OneTimePasscode.id == record.id,
                OneTimePasscode.is_used.is_(False),
            )
            .values(is_used=True)
            .execution_options(synchronize_session=False)
        )
        self._db.commit()
        self._db.expire(record)
        return result.rowcount == 1
