# vinoteca/config.py
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Static storefront data
    CATALOG_FILE: Path = DATA_DIR / "wines.json"
    STOREFRONT_FILE: Path = DATA_DIR / "storefront.json"

    # Number of product cards the grid shows
    VISIBLE_LIMIT: int = Field(default=8, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
