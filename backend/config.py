"""
Configuration management for The Fruit Union backend.

Loads settings from .env via pydantic-settings.

Notes:
    - All data lives in a Supabase project; this service only needs its URL,
      the public anon key and the JWT secret used to verify access tokens.
    - validate_production_settings() enforces strict CORS and a complete
      Supabase configuration in production.
"""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Supabase (remote data gateway) ──────────────────────────────
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_jwt_secret: str = ""
    supabase_jwt_audience: str = "authenticated"
    gateway_timeout_seconds: float = 10.0

    # ── Customer accounts ───────────────────────────────────────────
    # Customers log in as <username>@<login_email_domain>
    login_email_domain: str = "internal.local"

    # ── Auth rate limiting ──────────────────────────────────────────
    sign_in_rate_limit: int = 10
    sign_in_rate_window_seconds: int = 60

    # ── Application ─────────────────────────────────────────────────
    environment: str = "development"

    # ── CORS ────────────────────────────────────────────────────────
    cors_origins: str = "http://localhost:8080,http://127.0.0.1:8080,http://localhost:5173,http://127.0.0.1:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # allow unknown .env keys without crashing
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def rest_url(self) -> str:
        return f"{self.supabase_url.rstrip('/')}/rest/v1"

    @property
    def auth_url(self) -> str:
        return f"{self.supabase_url.rstrip('/')}/auth/v1"

    def validate_production_settings(self):
        """
        Validate settings for production safety.

        Called during app startup.
        """
        missing = [
            name
            for name in ("supabase_url", "supabase_anon_key", "supabase_jwt_secret")
            if not getattr(self, name)
        ]
        if self.environment == "production":
            if "*" in self.cors_origins:
                raise ValueError(
                    "CORS_ORIGINS must not contain '*' in production. "
                    "Set explicit allowed origins."
                )
            if missing:
                raise ValueError(
                    f"{', '.join(m.upper() for m in missing)} must be set in production."
                )
            logger.info("Production settings validated")
        else:
            warnings = [f"{m.upper()} is not set" for m in missing]
            if "*" in self.cors_origins:
                warnings.append("CORS_ORIGINS contains '*' (open access)")
            for w in warnings:
                logger.warning(f"⚠️  {w}")


# Global settings instance
settings = Settings()
