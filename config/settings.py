"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    mongodb_url: str = "mongodb://localhost:27017/exercise_tracker"

    # Storage backend: "mongo" or "memory"
    storage_backend: str = "mongo"

    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
