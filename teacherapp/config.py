"""Application configuration."""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        """Initialize settings from environment variables."""
        # API Settings
        self.API_TITLE: str = os.getenv("API_TITLE", "Teacher Registry")
        self.API_VERSION: str = os.getenv("API_VERSION", "0.1.0")
        self.DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

        # Server Settings
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "8000"))

        # Logging Settings
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()

        # Database Settings
        self.DB_HOST: str = os.getenv("DB_HOST", "localhost")
        self.DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
        self.DB_USER: str = os.getenv("DB_USER", "postgres")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
        self.DB_NAME: str = os.getenv("DB_NAME", "teachers")
        self.DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL") or None

    @property
    def host(self) -> str:
        return self.HOST

    @property
    def port(self) -> int:
        return self.PORT

    @property
    def debug(self) -> bool:
        return self.DEBUG

    @property
    def log_level(self) -> str:
        return self.LOG_LEVEL

    @property
    def environment(self) -> str:
        return self.ENVIRONMENT

    @property
    def is_production(self) -> bool:
        """Whether the service runs with production logging and defaults."""
        return self.ENVIRONMENT == "production"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings
