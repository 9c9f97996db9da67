"""
Core configuration module using Pydantic Settings.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite:///./gamereview.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Application
    APP_NAME: str = "Game Review Data Layer"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Reviewer accounts
    ACTIVATION_TOKEN_LENGTH: int = 32

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
