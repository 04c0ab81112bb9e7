"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from COOK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Recipes
    recipes_dir: Path = Path(".")
    recipe_suffix: str = ".cook"
    load_workers: int = 1  # >1 loads recipe files on a thread pool

    # Aisle / inflection config search
    config_home: Path = Path("~/.config/cook")

    # Text output
    line_width: int = 100

    # HTTP server
    server_host: str = "127.0.0.1"
    server_port: int = 9080

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"  # "text" or "json"
    log_file: Path | None = None  # also log to this file

    @property
    def config_dir(self) -> Path:
        """Get the user-level config directory with ~ expanded."""
        return self.config_home.expanduser()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
