"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, RedisDsn, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dpi_admin.core.constants import (
    DEFAULT_AUDIT_LOG_CAPACITY,
    DEFAULT_INSECURE_SECRET,
    MIN_SECRET_KEY_LENGTH,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "DPI Admin Portal"
    debug: bool = False
    environment: str = "development"  # development, staging, production
    secret_key: str = DEFAULT_INSECURE_SECRET

    # CORS
    cors_origins: list[str] = []

    # API Documentation
    api_docs_base_url: str = "https://api.example.com"

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Validate that secret_key is long enough.

        The insecure default is allowed here and rejected by is_production.

        Args:
            v: The secret key value

        Returns:
            The validated secret key

        Raises:
            ValueError: If secret key is too short
        """
        if v != DEFAULT_INSECURE_SECRET and len(v) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters. "
                "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )
        return v

    # Redis
    redis_url: RedisDsn = RedisDsn("redis://localhost:6379")

    # Auth
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    seed_demo_admins: bool = True
    session_backend: Literal["memory", "redis"] = "memory"

    # Audit log
    audit_backend: Literal["memory", "redis"] = "memory"
    audit_log_capacity: int = Field(default=DEFAULT_AUDIT_LOG_CAPACITY, gt=0)
    audit_redis_key: str = "dpi:audit_logs"

    # Observability
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment.

        Raises:
            ValueError: If using insecure secret key in production
        """
        is_prod = self.environment == "production"
        if is_prod and self.secret_key == DEFAULT_INSECURE_SECRET:
            raise ValueError(
                "SECRET_KEY must be set to a secure value in production. "
                "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )
        return is_prod

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
