"""Application settings and configuration.

This module defines all configuration options for the RedShare application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="RedShare", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Token signing
    secret_key: str = Field(default="redshare-secret-key", alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 30,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration; "sqlite://" keeps everything in process memory.
    database_url: str = Field(default="sqlite://", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    seed_demo_data: bool = Field(default=False, alias="SEED_DEMO_DATA")

    # Listing defaults
    default_page_size: int = Field(default=20, ge=1, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, ge=1, alias="MAX_PAGE_SIZE")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
