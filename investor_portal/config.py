"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    ``database_url`` and ``jwt_secret_key`` have no defaults: a process started
    without them fails on import with a validation error.
    """

    # Database
    database_url: str = Field(min_length=1)

    # Session tokens
    jwt_secret_key: str = Field(min_length=1)  # Generate with: openssl rand -hex 32
    jwt_algorithm: str = "HS256"
    session_token_expire_days: int = 7
    session_cookie_name: str = "token"

    # One-time passcodes
    otp_expiry_minutes: int = 10

    # Password hashing
    bcrypt_rounds: int = 10

    # Email (SendGrid). Without an API key OTP codes are only written to the log.
    sendgrid_api_key: str = ""
    email_from_address: str = "noreply@investor-portal.local"
    email_from_name: str = "Investor Relations"

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    allowed_origins: list[str] = ["http://localhost:5173"]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def is_production(self) -> bool:
        """Whether cookies must be issued as secure, cross-site cookies."""
        return self.environment.lower() == "production"


settings = Settings()
