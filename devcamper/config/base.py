"""
Base configuration module for the DevCamper API.

This module provides the base settings class that the environment-specific
settings classes inherit from.
"""

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class BaseAppSettings(BaseSettings):
    """
    Base settings class for application configuration.

    Attributes:
        APP_NAME: The name of the application
        DEBUG: Flag to enable/disable debug mode
        VERSION: Application version string
        DATABASE_URL: Async SQLAlchemy database URL
        DB_ECHO: Enable SQL query logging (echo)
        DB_POOL_SIZE: Connection pool size for the database
        DB_CREATE_TABLES: Create missing tables on startup
        MAX_FILE_UPLOAD: Maximum photo upload size in bytes
        FILE_UPLOAD_PATH: Directory uploaded photos are written to
        PAGINATION_STRICT: Reject non-positive page/limit values with 400
        PAGINATION_TOTAL_FILTERED: Compute pagination against the filtered count
        LOG_LEVEL: Logging level name
        LOG_JSON_FORMAT: Emit log records as JSON
    """

    APP_NAME: str = Field(default="DevCamper")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="1.0.0")

    # Database configuration
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./devcamper.db",
        description="Async SQLAlchemy database URL",
    )
    DB_ECHO: bool = Field(default=False, description="Enable SQL query logging (echo)")
    DB_POOL_SIZE: int = Field(
        default=5, description="Connection pool size for the database"
    )
    DB_CREATE_TABLES: bool = Field(
        default=True, description="Create missing tables on startup"
    )

    # Upload configuration
    MAX_FILE_UPLOAD: int = Field(
        default=1000000, description="Maximum photo upload size in bytes"
    )
    FILE_UPLOAD_PATH: str = Field(
        default="./public/uploads", description="Directory for uploaded photos"
    )

    # Listing configuration
    PAGINATION_STRICT: bool = Field(
        default=False,
        description="Reject non-positive page or limit values instead of passing them through",
    )
    PAGINATION_TOTAL_FILTERED: bool = Field(
        default=False,
        description="Use the filtered count instead of the collection size for pagination",
    )

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level name")
    LOG_JSON_FORMAT: bool = Field(default=False, description="Emit JSON log records")

    @field_validator("DATABASE_URL", mode="before")
    def validate_database_url(cls, value):
        """
        Ensure DATABASE_URL names an async driver.
        """
        if value and value.startswith("postgresql://"):
            raise ValueError(
                "DATABASE_URL must start with 'postgresql+asyncpg://' for the async engine. "
                f"You provided: {value}"
            )
        if value and value.startswith("sqlite://"):
            raise ValueError(
                "DATABASE_URL must start with 'sqlite+aiosqlite://' for the async engine. "
                f"You provided: {value}"
            )
        return value

    @field_validator("MAX_FILE_UPLOAD")
    def validate_max_file_upload(cls, value):
        """Upload limit must be a positive number of bytes."""
        if value <= 0:
            raise ValueError("MAX_FILE_UPLOAD must be a positive number of bytes")
        return value

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")
