"""Configuration for the Leetify client."""

from typing import Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


def validate_base_url(value: str) -> str:
    """Check that ``value`` is an absolute http(s) URL, returning it unchanged.

    Routes are appended to the base URL, so a query or fragment is rejected.
    """
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as e:
        raise ValueError(f"not a valid URL: {value!r}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"not an absolute http(s) URL: {value!r}")
    if url.query or url.fragment:
        raise ValueError(f"must not carry a query or fragment: {value!r}")
    return value


class ClientConfig(BaseModel):
    """Validated, immutable client options."""

    api_key: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, allow_inf_nan=False)
    base_url: str = Field(default=DEFAULT_BASE_URL)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Base URL must be absolute."""
        return validate_base_url(v)

    def __repr__(self) -> str:
        api_key = "[REDACTED]" if self.api_key else None
        return (
            f"ClientConfig(api_key={api_key!r}, timeout={self.timeout!r}, "
            f"base_url={self.base_url!r})"
        )


class Settings(BaseSettings):
    """Client settings loaded from LEETIFY_* environment variables."""

    api_key: Optional[str] = Field(default=None)
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=DEFAULT_TIMEOUT)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEETIFY_",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get settings instance, reading a local .env file first."""
    load_dotenv()
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
