"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ask.constants import GITHUB_API_URL, GITHUB_URL, HTTPX_TIMEOUT


class Settings(BaseSettings):
    """Application settings loaded from ASK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ASK_",
        case_sensitive=False,
    )

    # GitHub
    github_url: str = GITHUB_URL
    github_api_url: str = GITHUB_API_URL
    http_timeout: float = HTTPX_TIMEOUT

    # Local keys
    ssh_dir: Path | None = None

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("github_url", "github_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("http_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure the request timeout is usable."""
        if v <= 0:
            raise ValueError("ASK_HTTP_TIMEOUT must be greater than zero")
        return v

    @property
    def authorized_keys_dir(self) -> Path:
        """Directory holding authorized_keys (defaults to ~/.ssh)."""
        if self.ssh_dir is not None:
            return self.ssh_dir.expanduser()
        return Path.home() / ".ssh"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
