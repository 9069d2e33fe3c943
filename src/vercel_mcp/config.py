"""Runtime configuration loaded from the environment."""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide settings.

    BASE_URL has no default: the server refuses to start without it.
    """

    base_url: str = Field(..., min_length=1, description="Upstream Vercel API base URL")
    host: str = "0.0.0.0"
    port: int = Field(8081, ge=1, le=65535)
    node_env: Optional[Literal["development", "production", "staging", "test"]] = None
    sentry_dsn: Optional[str] = None
    request_timeout: float = Field(30.0, gt=0)
    # Only used by the stdio transport; HTTP requests carry their own token
    vercel_access_token: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def api_base_url(self) -> str:
        return self.base_url.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
