"""Proxy configuration loaded from environment variables (and ``.env``)."""

from pydantic_settings import BaseSettings

from spotify_proxy.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_REQUEST_TIMEOUT,
    SPOTIFY_API_BASE,
    SPOTIFY_TOKEN_URL,
)


class ProxySettings(BaseSettings):
    """Spotify proxy configuration."""

    # Spotify credentials
    SPOTIFY_CLIENT_ID: str = ""
    SPOTIFY_CLIENT_SECRET: str = ""

    # Endpoints
    SPOTIFY_TOKEN_URL: str = SPOTIFY_TOKEN_URL
    SPOTIFY_API_BASE: str = SPOTIFY_API_BASE

    # HTTP
    REQUEST_TIMEOUT_SECONDS: float = DEFAULT_REQUEST_TIMEOUT

    # Logging
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL
    LOG_JSON: bool = False

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    @property
    def has_credentials(self) -> bool:
        return bool(self.SPOTIFY_CLIENT_ID and self.SPOTIFY_CLIENT_SECRET)
