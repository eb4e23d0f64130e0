"""
Application configuration using Pydantic Settings
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "GlamBook"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API
    API_V1_PREFIX: str = "/api/v1"
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Database
    DATABASE_URL: str = "sqlite:///./glambook.db"
    AUTO_CREATE_TABLES: bool = True

    # Session tokens
    JWT_SECRET_KEY: str = "jwt-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    SESSION_EXPIRE_MINUTES: Optional[int] = None  # None keeps sessions until sign-out

    # Salon defaults
    DEFAULT_TIMEZONE: str = "UTC"
    ACTIVE_CLIENT_WINDOW_DAYS: int = 30
    DEFAULT_SUBSCRIPTION_TIER: str = "basic"
    DEFAULT_FEATURES: list[str] = ["appointments", "clients", "staff"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
