"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Storage
    storage_backend: Literal["memory", "sqlalchemy"] = "memory"
    database_url: str = "sqlite://"  # in-memory SQLite unless overridden
    seed_sample_data: bool = True

    # Service
    service_name: str = "collection-gateway"
    log_level: str = "INFO"


settings = Settings()
