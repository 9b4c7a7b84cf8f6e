"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./crm.db")

    # Logging
    log_level: str = Field(default="INFO")

    # API
    environment: str = Field(default="development")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
        ]
    )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has a durable database location."""
        if self.environment == "production":
            if self.database_url.startswith("sqlite:///./"):
                raise ValueError("DATABASE_URL should not use a relative SQLite path in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
