"""Client configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Site credentials and endpoint hosts for one client instance."""

    model_config = SettingsConfigDict(
        env_prefix="UNBXD_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    site_key: str = Field(min_length=1)
    api_key: SecretStr
    secure: bool = True
    search_host: str = "search.unbxdapi.com"
    recommendations_host: str = "apac-recommendations.unbxdapi.com"
    request_timeout_seconds: float = Field(default=10.0, gt=0, le=120)

    @field_validator("search_host", "recommendations_host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("host must not be empty")
        return value

    @property
    def scheme(self) -> str:
        return "https" if self.secure else "http"


@lru_cache
def get_settings() -> ClientSettings:
    """Return cached settings instance."""

    return ClientSettings()  # type: ignore[call-arg]


__all__ = ["ClientSettings", "get_settings"]
