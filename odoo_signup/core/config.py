"""
Application configuration using Pydantic Settings
"""

from functools import lru_cache
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    # Application
    PORT: int = 8080
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"
    DOMAIN: str = "odoo.the9o.com"
    ALLOWED_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    # Odoo server
    ODOO_URL: str = "http://localhost:8069"
    ODOO_MASTER_PASSWORD: str
    ODOO_COMPANY: str = "Sample"
    ODOO_VERIFY_SSL: bool = False

    # Clone mode
    TEMPLATE_DATABASE: str = "odoo-template"
    ADMIN_USER: str = "admin"
    ADMIN_PASSWORD: str = "admin"
    DEFAULT_DB_MODE: str = "clone"

    # Rate limiting (token bucket)
    RATE_LIMIT: float = 10.0
    BURST_LIMIT: int = 20

    # HTTP client timeout, also the readiness polling budget
    HTTP_TIMEOUT_SECONDS: float = 300.0
    POLL_INTERVAL_SECONDS: float = 3.0

    @field_validator("ODOO_MASTER_PASSWORD")
    @classmethod
    def _require_master_password(cls, value: str) -> str:
        if not value:
            raise ValueError("ODOO_MASTER_PASSWORD environment variable is required")
        return value

    @field_validator("ODOO_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("DEFAULT_DB_MODE")
    @classmethod
    def _check_db_mode(cls, value: str) -> str:
        value = (value or "clone").strip().lower()
        if value not in ("create", "clone"):
            raise ValueError("DEFAULT_DB_MODE must be 'create' or 'clone'")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return (value or "info").lower()

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def _parse_origins(cls, value: Any):
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value

    @field_validator("RATE_LIMIT", "BURST_LIMIT", "HTTP_TIMEOUT_SECONDS", mode="before")
    @classmethod
    def _fallback_on_garbage(cls, value: Any, info):
        # Unparseable numbers fall back to the default instead of failing startup
        if isinstance(value, str):
            parse = int if info.field_name == "BURST_LIMIT" else float
            try:
                parse(value)
            except ValueError:
                return cls.model_fields[info.field_name].default
        return value

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    def instance_url(self, database: str) -> str:
        """Public host name of a provisioned database"""
        return f"{database}.{self.DOMAIN}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()

