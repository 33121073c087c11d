"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.
"""

from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Application Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Analysis defaults
    DEFAULT_INDUSTRY: str = "auto"
    MAX_TEXT_LENGTH: int = 500_000  # characters accepted by the API

    # Remote backend (optional comparison call)
    BACKEND_URL: Optional[str] = None
    BACKEND_TIMEOUT: float = 30.0
    ENABLE_BACKEND_COMPARISON: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env file
        case_sensitive = False  # Allow both UPPERCASE and lowercase

    @property
    def backend_configured(self) -> bool:
        return bool(self.BACKEND_URL and self.BACKEND_URL.strip())


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()
