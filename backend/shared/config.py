"""
Centralized configuration for the PDF Chat gateway.

All settings are loaded from environment variables with sensible defaults.
Cookie lifetimes are kept per operation because login, signup and refresh
have historically issued sessions of different length.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "PDF Chat Gateway"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Backend session service
    backend_url: str = "http://localhost:8000"
    backend_timeout: Optional[float] = 30.0

    # Session cookie
    session_cookie_name: str = "access_token"
    session_ttl_login: int = 60 * 60 * 24
    session_ttl_signup: int = 60 * 60
    session_ttl_refresh: int = 60 * 60

    # Session client
    gateway_url: str = "http://localhost:3000"
    session_expired_redirect_delay: float = 2.0
    login_path: str = "/login"

    @property
    def is_production(self) -> bool:
        """Whether cookies must be marked secure."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
