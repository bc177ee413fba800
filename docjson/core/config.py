from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[2] / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Document to JSON API"
    app_version: str = "0.1.0"

    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    base_dir: Path = Field(default_factory=lambda: Path(__file__).resolve().parents[2])
    temp_dir: Optional[Path] = None

    max_upload_mb: int = Field(default=50, gt=0)

    allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    def configure_paths(self) -> None:
        """Resolve the scratch directory and create it when missing."""
        self.temp_dir = (self.temp_dir or (self.base_dir / "uploads" / "tmp")).resolve()
        self.temp_dir.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    settings = Settings()
    settings.configure_paths()
    return settings
