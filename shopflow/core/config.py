"""
Core configuration module using Pydantic Settings.
Supports environment variables and .env files.
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="allow"
    )

    # Application
    app_name: str = Field(default="ShopFlow", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # Database (in-memory by default, records live as long as the process)
    database_url: str = Field(default="sqlite://", alias="DATABASE_URL")
    db_echo: bool = Field(default=False, alias="DB_ECHO")

    # JWT Authentication
    jwt_secret_key: str = Field(
        default="change-this-in-production-please",
        alias="JWT_SECRET_KEY"
    )
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_access_token_expire_minutes: int = Field(default=60 * 24, alias="JWT_ACCESS_TOKEN_EXPIRE_MINUTES")

    # Security
    bcrypt_rounds: int = Field(default=12, alias="BCRYPT_ROUNDS")
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        alias="CORS_ORIGINS"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    # Rate Limiting
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")
    rate_limit_per_minute: int = Field(default=100, alias="RATE_LIMIT_PER_MINUTE")

    # Demo account
    seed_demo_user: bool = Field(default=True, alias="SEED_DEMO_USER")
    demo_user_email: str = Field(default="demo@shop.com", alias="DEMO_USER_EMAIL")
    demo_user_password: str = Field(default="demo123", alias="DEMO_USER_PASSWORD")
    demo_user_name: str = Field(default="Demo User", alias="DEMO_USER_NAME")
    demo_shop_name: str = Field(default="Demo Shop", alias="DEMO_SHOP_NAME")

    # Analytics: fixing the seed makes the synthetic figures reproducible
    analytics_seed: Optional[int] = Field(default=None, alias="ANALYTICS_SEED")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency injection for FastAPI."""
    return settings
