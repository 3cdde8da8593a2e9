"""
Configuration and settings for the portfolio backend.
"""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")

    # Server (PORT is injected by the hosting platform)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # LeetCode
    leetcode_username: str = Field(default="tejasRkirigeri08")
    leetcode_graphql_url: str = Field(default="https://leetcode.com/graphql")

    # Codeforces
    codeforces_handle: str = Field(default="tejasrk1642006")
    codeforces_api_url: str = Field(default="https://codeforces.com/api")

    # Upstream requests
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # IANA zone used to bucket submissions into days; server local time if unset.
    stats_timezone: Optional[str] = Field(default=None)

    def stats_tzinfo(self) -> Optional[tzinfo]:
        if not self.stats_timezone:
            return None
        return ZoneInfo(self.stats_timezone)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
