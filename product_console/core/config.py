"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./products.db",
        description="Async connection URL for the product catalog database",
        alias="PRODUCT_CONSOLE_DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo emitted SQL statements through the sqlalchemy.engine logger",
        alias="PRODUCT_CONSOLE_DATABASE_ECHO",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="PRODUCT_CONSOLE_LOG_LEVEL",
    )
    log_format: Literal["simple", "detailed", "json"] = Field(
        default="detailed",
        description="Log line format",
        alias="PRODUCT_CONSOLE_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="PRODUCT_CONSOLE_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write DEBUG-level logs to a file under log_file_dir",
        alias="PRODUCT_CONSOLE_ENABLE_FILE_LOGGING",
    )


# Global settings instance
settings = Settings()
