"""
Configuration and settings for the QuickCart API.

The settings are loaded from environment variables using pydantic-settings.
See `.env.example` in the project root for available variables.
"""
from __future__ import annotations

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="QuickCart", alias="APP_NAME")
    # "production" disables every development convenience below
    app_env: str = Field(default="development", alias="APP_ENV")

    # JWT configuration
    jwt_secret: str = Field(alias="JWT_SECRET")
    access_token_expire_minutes: int = Field(
        default=7 * 24 * 60, alias="ACCESS_TOKEN_EXPIRE_MINUTES"
    )

    # CORS settings (comma-separated list)
    allowed_origins: str = Field(
        default="https://quickcart-frontend-mu.vercel.app,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
    )

    # Database configuration
    sql_database_uri: str = Field(default="sqlite:///data/app.db", alias="SQLALCHEMY_DATABASE_URI")

    # Password reset
    reset_code_ttl_minutes: int = Field(default=10, alias="RESET_CODE_TTL_MINUTES")
    # Echo reset codes in API responses.  Ignored when APP_ENV=production.
    expose_reset_code: bool = Field(default=False, alias="EXPOSE_RESET_CODE")

    # Primary email provider (Resend)
    resend_api_key: Optional[str] = Field(default=None, alias="RESEND_API_KEY")
    resend_from: str = Field(default="QuickCart <onboarding@resend.dev>", alias="RESEND_FROM")

    # Fallback SMTP provider
    smtp_host: str = Field(default="smtp.gmail.com", alias="SMTP_HOST")
    smtp_port: int = Field(default=587, alias="SMTP_PORT")
    email_user: Optional[str] = Field(default=None, alias="EMAIL_USER")
    email_pass: Optional[str] = Field(default=None, alias="EMAIL_PASS")

    # Recipient for contact form submissions
    admin_email: Optional[str] = Field(default=None, alias="ADMIN_EMAIL")

    logs_dir: str = Field(default="logs", alias="LOGS_DIR")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def reset_codes_exposed(self) -> bool:
        """Whether reset codes may be returned to API callers."""
        return self.expose_reset_code and not self.is_production

    def origins(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


settings = Settings()
