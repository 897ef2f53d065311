"""
Configuration for version-app
Loads settings from environment variables
"""
from typing import Optional

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Release
    VERSION: str = "v1"

    # Database
    DB_HOST: str = "catalogue-db"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "fake_password"
    DB_NAME: str = "socksdb"
    DB_CONNECT_TIMEOUT: Optional[str] = None  # seconds; unset keeps driver default

    # Service
    PORT: str = "8080"
    SERVICE_NAME: str = "version-app"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_ignore_empty = True
        frozen = True

    @property
    def db_target(self) -> str:
        """host:port/name, safe to log"""
        return f"{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
