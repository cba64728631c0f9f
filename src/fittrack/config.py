"""Runtime configuration for fittrack."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "http://localhost:8000/api"


def default_data_dir() -> Path:
    """Directory holding the local database and credential files."""
    return Path.home() / ".fittrack"


class Settings(BaseSettings):
    """Settings loaded from FITTRACK_* environment variables or a .env file."""

    api_url: str = Field(default=DEFAULT_API_URL)
    timeout: float = Field(default=10.0, gt=0)
    data_dir: Path = Field(default_factory=default_data_dir)
    credential_backend: Literal["sqlite", "file", "memory"] = "sqlite"
    log_level: str = "WARNING"
    log_file: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FITTRACK_",
        extra="ignore",
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        if not value:
            raise ValueError("FITTRACK_API_URL must not be empty")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        return value.upper()

    @property
    def db_path(self) -> Path:
        return self.data_dir / "fittrack.db"

    @property
    def credentials_file(self) -> Path:
        return self.data_dir / "credentials.json"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
