"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        SYSTEMLY_DB_HOST: Database host (default: localhost)
        SYSTEMLY_DB_PORT: Database port (default: 5432)
        SYSTEMLY_DB_DATABASE: Database name (default: systemly)
        SYSTEMLY_DB_USERNAME: Database user (default: systemly)
        SYSTEMLY_DB_PASSWORD: Database password (required in production)
        SYSTEMLY_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        SYSTEMLY_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        SYSTEMLY_DB_ECHO: Log emitted SQL statements (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="SYSTEMLY_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="systemly", description="Database name")
    username: str = Field(default="systemly", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(
        default=False,
        description="Log every SQL statement the entity store emits",
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class StoreBackend(StrEnum):
    """Where access data is kept."""

    MEMORY = "memory"
    DATABASE = "database"


class AccessSettings(BaseSettings):
    """Settings for the access management context.

    Environment variables:
        SYSTEMLY_ACCESS_STORE_BACKEND: "memory" or "database" (default: memory)
        SYSTEMLY_ACCESS_OFFBOARDING_REVOKES_ACCESS: Revoke access records when
            an offboarding request is completed (default: true)
        SYSTEMLY_ACCESS_BOOTSTRAP_ADMINS: JSON list of emails provisioned as
            administrators at startup (default: [])
        SYSTEMLY_ACCESS_BOOTSTRAP_ADMIN_NAME: Display name given to bootstrap
            administrators (default: Administrator)
    """

    model_config = SettingsConfigDict(
        env_prefix="SYSTEMLY_ACCESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    store_backend: StoreBackend = Field(
        default=StoreBackend.MEMORY,
        description="Entity store implementation",
    )
    offboarding_revokes_access: bool = Field(
        default=True,
        description="Delete matching access records when an offboarding request completes",
    )
    bootstrap_admins: list[str] = Field(
        default_factory=list,
        description="Emails of users provisioned as administrators at startup",
    )
    bootstrap_admin_name: str = Field(
        default="Administrator",
        min_length=1,
        description="Name given to bootstrap administrators",
    )

    @field_validator("bootstrap_admins")
    @classmethod
    def normalize_bootstrap_admins(cls, value: list[str]) -> list[str]:
        """Strip, lowercase and de-duplicate bootstrap admin emails."""
        seen: list[str] = []
        for email in value:
            email = email.strip().lower()
            if email and email not in seen:
                seen.append(email)
        return seen


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Systemly API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def access(self) -> AccessSettings:
        """Get access management settings."""
        return get_access_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_access_settings() -> AccessSettings:
    """Get cached access management settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return AccessSettings()
