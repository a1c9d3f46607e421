from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


class Settings(BaseSettings):
    """Application configuration"""

    # API Settings
    app_name: str = "Entity Cache"
    app_version: str = "1.0.0"
    debug: bool = False

    # Cache Settings
    cache_max_size: int = 3  # Validated by BoundedCache, must be > 0

    # Store Settings
    store_backend: Literal["sql", "memory"] = "sql"
    database_url: str = "sqlite:///./data/entities.db"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        # logging only accepts upper-case level names
        if isinstance(value, str):
            return value.strip().upper()
        return value


settings = Settings()
