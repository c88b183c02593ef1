"""
Centralized configuration for the SurveyWallet backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with SURVEYWALLET_ (e.g., SURVEYWALLET_JWT_SECRET).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SURVEYWALLET_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "SurveyWallet API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "SurveyWalletDB"
    mongodb_timeout_ms: int = 5000

    # Session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    session_cookie_name: str = "token"
    session_ttl_hours: int = 24
    session_cookie_secure: bool = False
    session_cookie_samesite: str = "lax"
    session_revocation_enabled: bool = True

    # Stripe
    stripe_secret_key: str = ""

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
