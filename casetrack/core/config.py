"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. SECRET_KEY is validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except secret_key.
    """

    # App
    app_name: str = "casetrack"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # Storage: the whole workspace lives in one JSON document
    data_file: str = "database.json"
    # Built front-end bundle served for non-API routes
    static_dir: str = "dist"

    # Security
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480  # 8 hours
    bcrypt_rounds: int = 12
    rate_limit_enabled: bool = True

    # CORS
    allowed_origins: str = "*"

    # Limits
    max_attachment_bytes: int = 2 * 1024 * 1024  # 2MB
    max_request_bytes: int = 50 * 1024 * 1024  # 50MB

    # Domain
    owner_name: str = "Ms Tributário"
    archived_status_name: str = "Arquivado"
    import_actor_name: str = "Import process"
    due_soon_days: int = 7

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env and numeric limits."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32. "
                "Set it in the environment or .env file."
            )
        if self.max_attachment_bytes <= 0 or self.max_request_bytes <= 0:
            raise ValueError("max_attachment_bytes and max_request_bytes must be positive")
        if self.due_soon_days < 0:
            raise ValueError("due_soon_days cannot be negative")
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
