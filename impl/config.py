from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


ROOT_ENV_FILE = Path(__file__).resolve().parents[1] / ".env"

DOTCOM_API_ENDPOINT = "https://api.github.com"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(ROOT_ENV_FILE), env_file_encoding="utf-8", extra="ignore")

    app_name: str = "ghclient"

    request_timeout_seconds: float = 30.0
    per_page: Optional[int] = None  # None -> remote default page size
    user_agent: str = "ghclient"
    github_api_version: str = "2022-11-28"

    # optional credential picked up by the default credential store
    github_token: str = ""
    github_api_endpoint: str = DOTCOM_API_ENDPOINT

    @field_validator("per_page")
    @classmethod
    def _validate_per_page(cls, v: Optional[int]) -> Optional[int]:
        if v is None:
            return v
        if not 1 <= v <= 100:
            raise ValueError("PER_PAGE must be between 1 and 100")
        return v

    @field_validator("github_token", "github_api_endpoint")
    @classmethod
    def _strip(cls, v: str) -> str:
        return (v or "").strip()


settings = Settings()
