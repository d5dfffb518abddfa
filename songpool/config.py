"""
Configuration management for the songpool backend.

Uses Pydantic settings for validation and environment variable support.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration."""

    model_config = SettingsConfigDict(
        env_prefix='DB_',
        env_file='.env',
        extra='ignore'
    )

    host: str = Field(default='localhost', description='Database host')
    port: int = Field(default=5432, description='Database port')
    name: str = Field(default='songpool', description='Database name')
    user: str = Field(default='postgres', description='Database user')
    password: str = Field(default='postgres', description='Database password')
    echo_sql: bool = Field(default=False, description='Echo SQL queries')

    @property
    def url(self) -> str:
        """Build database URL."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class SerializerSettings(BaseSettings):
    """Response serialization configuration."""

    model_config = SettingsConfigDict(
        env_prefix='SERIALIZER_',
        env_file='.env',
        extra='ignore'
    )

    format: str = Field(default='json', description='Format token the link normalizer answers to')
    links_enabled: bool = Field(default=True, description='Add _links to registered resources')


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Application
    app_name: str = Field(default='Songpool API')
    app_version: str = Field(default='0.1.0')
    debug: bool = Field(default=False)
    environment: str = Field(default='development')  # development, staging, production

    # API
    api_prefix: str = Field(default='/api')
    api_version: str = Field(default='v1')

    # Logging
    log_level: str = Field(default='INFO')
    log_format: str = Field(default='text')  # json or text

    # Sub-settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    serializer: SerializerSettings = Field(default_factory=SerializerSettings)

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ('json', 'text'):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def api_base_path(self) -> str:
        """Versioned API root, e.g. /api/v1."""
        return f"{self.api_prefix.rstrip('/')}/{self.api_version.strip('/')}"

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == 'production'


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached application settings.

    Uses LRU cache to avoid re-reading environment variables on every access.
    """
    return AppSettings()
