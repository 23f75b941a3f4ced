"""Application constants to avoid magic strings."""


class Role:
    """Role tiers embedded in session tokens."""

    INVESTOR = "investor"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    ADMIN_ROLES = (ADMIN, SUPER_ADMIN)


class OtpChannel:
    """Delivery channels for one-time passcodes."""

    EMAIL = "email"
    PHONE = "phone"
