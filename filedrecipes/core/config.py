from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

# Recipe files are always UTF-8. A leading byte-order mark is dropped on read.
ENCODING = "utf-8"
READ_ENCODING = "utf-8-sig"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    recipes_path: Path = Path("recipes.txt")
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {
        "env_file": ".env",
        "env_prefix": "FILEDRECIPES_",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
