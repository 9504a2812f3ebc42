from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)

_DESCRIPTION = """CRUD application for a product warehouse. The service can:

- Search products by parameter.

- Edit products by parameter.

- Delete products by parameter.

- Create new products.

- Get all products.

- Delete all products."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Warehouse - OpenAPI 3.0"
    app_version: str = "1.0.11"
    app_description: str = _DESCRIPTION
    app_env: str = "development"
    database_url: str = "sqlite:///./warehouse.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL statements
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_inventory: str = "INFO"        # product services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance, reads .env once."""
    return Settings()
