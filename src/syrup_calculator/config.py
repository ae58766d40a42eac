"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from syrup_calculator.services.calculator import MissingCaffeinePolicy

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_BUNDLED_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = _BUNDLED_DATA_DIR
    catalog_ttl_seconds: int = 3600
    missing_caffeine_policy: MissingCaffeinePolicy = MissingCaffeinePolicy.REJECT
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
