"""Delivery of one-time codes to principals."""

import logging
from abc import ABC, abstractmethod

from investor_portal.constants import OtpChannel
from investor_portal.services.email_service import EmailService

logger = logging.getLogger(__name__)


class NotificationSender(ABC):
    """Delivers a one-time code to a destination (email address, phone number)."""

    @abstractmethod
    def send_code(self, destination: str, code: str) -> bool:
        """Send ``code`` to ``destination``. Returns True if it was handed off."""


class EmailCodeSender(NotificationSender):
    """Sends codes by email through SendGrid."""

    def send_code(self, destination: str, code: str) -> bool:
        return EmailService.send_otp_email(destination, code)


class LogCodeSender(NotificationSender):
    """Writes codes to the application log.

    Used for the phone channel until an SMS gateway is wired in.
    """

    def send_code(self, destination: str, code: str) -> bool:
        logger.info("[PHONE OTP] To: %s, Code: %s", destination, code)
        return True


def default_code_senders() -> dict[str, NotificationSender]:
    """Map each OTP channel to the sender that serves it."""
    return {
        OtpChannel.EMAIL: EmailCodeSender(),
        OtpChannel.PHONE: LogCodeSender(),
    }
