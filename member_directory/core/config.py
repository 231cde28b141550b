"""
Configuration management for the member directory search service.

This module provides centralized configuration management supporting:
- Environment variables and .env files
- PostgreSQL connection settings
- Search, suggestion and history limits
"""

from functools import lru_cache
from typing import List, Optional

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Hard ceilings on bounded reads; settings may lower them, never raise them.
MAX_SEARCH_RESULTS = 50
MAX_SUGGESTIONS = 10
# Suggestion queries shorter than this never reach the store.
MIN_SUGGESTION_QUERY_LENGTH = 2


class Settings(BaseSettings):
    """
    Main application settings with defaults suited to local development.
    """

    # Environment Detection
    ENVIRONMENT: str = Field(
        default="local",
        description="Environment (local/development/staging/production)"
    )
    DEBUG: bool = Field(
        default=False,
        description="Debug mode"
    )

    # Core Application Settings
    APP_NAME: str = Field(
        default="Member Directory Search",
        description="Application name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # Server Configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server host"
    )
    PORT: int = Field(
        default=8000,
        description="Server port"
    )

    # CORS Configuration
    CORS_ORIGINS: str = Field(
        default="*",
        description="Comma-separated CORS origins"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_FORMAT: str = Field(
        default="console",
        description="Log format (json/console)"
    )

    # PostgreSQL Configuration
    POSTGRES_URL: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL"
    )
    POSTGRES_HOST: str = Field(
        default="localhost",
        description="PostgreSQL host"
    )
    POSTGRES_PORT: int = Field(
        default=5432,
        description="PostgreSQL port"
    )
    POSTGRES_USER: str = Field(
        default="directory_user",
        description="PostgreSQL user"
    )
    POSTGRES_PASSWORD: str = Field(
        default="directory_password",
        description="PostgreSQL password"
    )
    POSTGRES_DB: str = Field(
        default="member-directory",
        description="PostgreSQL database name"
    )
    DB_POOL_SIZE: int = Field(
        default=10,
        description="Connection pool size"
    )
    DB_POOL_TIMEOUT: int = Field(
        default=30,
        description="Seconds to wait for a pooled connection"
    )

    # Search Configuration
    SEARCH_MAX_RESULTS: int = Field(
        default=MAX_SEARCH_RESULTS,
        ge=1,
        description="Maximum profiles returned by a directory search"
    )
    SUGGESTION_LIMIT: int = Field(
        default=MAX_SUGGESTIONS,
        ge=1,
        description="Maximum autocomplete suggestions returned"
    )
    SUGGESTION_MIN_QUERY_LENGTH: int = Field(
        default=MIN_SUGGESTION_QUERY_LENGTH,
        ge=1,
        description="Queries shorter than this return no suggestions"
    )
    SEARCH_HISTORY_DEFAULT_LIMIT: int = Field(
        default=10,
        ge=1,
        description="Default number of history entries returned"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate and normalize environment name."""
        v = v.lower()
        if v not in ('local', 'development', 'staging', 'production'):
            logger.warning(f"Unknown environment: {v}, defaulting to 'local'")
            return 'local'
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level names."""
        v = v.upper()
        if v not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Unsupported LOG_LEVEL: {v}")
        return v

    @field_validator('SEARCH_MAX_RESULTS')
    @classmethod
    def cap_search_results(cls, v: int) -> int:
        return min(v, MAX_SEARCH_RESULTS)

    @field_validator('SUGGESTION_LIMIT')
    @classmethod
    def cap_suggestions(cls, v: int) -> int:
        return min(v, MAX_SUGGESTIONS)

    @field_validator('SUGGESTION_MIN_QUERY_LENGTH')
    @classmethod
    def floor_suggestion_query_length(cls, v: int) -> int:
        return max(v, MIN_SUGGESTION_QUERY_LENGTH)

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == 'production'

    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.ENVIRONMENT == 'local'

    def get_cors_origins(self) -> List[str]:
        """Get CORS origins as a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_postgres_url(self) -> str:
        """Get PostgreSQL connection URL."""
        if self.POSTGRES_URL:
            return self.POSTGRES_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings.

    Loads settings from environment variables and the .env file once and
    returns the cached instance on subsequent calls.
    """
    settings = Settings()

    logger.info(
        "Settings loaded",
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
        search_max_results=settings.SEARCH_MAX_RESULTS,
        suggestion_limit=settings.SUGGESTION_LIMIT,
    )

    return settings
