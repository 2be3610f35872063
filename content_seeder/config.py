"""
Seeder configuration using pydantic-settings.
Loads from environment variables with .env file support.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from content_seeder.schemas.content import Visibility

# Shortest policies the password-length check can still test below
MIN_CLIENT_PASSWORD_LENGTH = 1
MIN_EXPECTED_PASSWORD_LENGTH = 2


class Settings(BaseSettings):
    """Seeder settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Target API
    api_base_url: str = "http://127.0.0.1:3002"
    api_v1_prefix: str = "/api/v1"
    request_timeout: float = 15.0  # seconds per request

    # Output artifact
    output_file: str = "content-ids.json"

    # Generated admin account
    admin_email_domain: str = "example.com"
    admin_password: str = "AdminPass123!"
    admin_first_name: str = "Admin"
    admin_last_name: str = "User"

    # Seeded content
    content_visibility: Visibility = Visibility.PERSONAL

    # Probe account (must already exist for the login probe)
    probe_username: str = "testuser"
    probe_email: str = "newemail@example.com"
    probe_password: str = "TestPassword123!@#"

    # Password policy: what the frontend advertises vs what the server should enforce
    client_min_password_length: int = Field(default=6, ge=MIN_CLIENT_PASSWORD_LENGTH)
    expected_min_password_length: int = Field(default=12, ge=MIN_EXPECTED_PASSWORD_LENGTH)

    # Application
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    @property
    def api_root(self) -> str:
        """Base URL joined with the versioned prefix."""
        return self.api_base_url.rstrip("/") + "/" + self.api_v1_prefix.strip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
