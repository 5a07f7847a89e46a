"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "PowerBall Lottery Generator"
    APP_ENV: str = "development"
    DEBUG: bool = True

    # Data
    DATA_FILE: Path | None = None  # historical drawings text file loaded at startup

    # Generator
    RANDOM_SEED: int | None = None  # None = unseeded
    HOT_COLD_COUNT: int = 10
    MAX_TICKETS_PER_REQUEST: int = 100

    # Logging
    LOG_DIR: Path = Path("./logs")


settings = Settings()
