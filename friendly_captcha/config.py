"""
Client configuration.

ClientConfig is the immutable, validated configuration a FriendlyCaptchaClient
runs with. ClientSettings loads the same values from environment variables
(and .env file) with the FRC_ prefix; ClientBuilder.from_settings() turns it
into a client.

Decision on the deprecated siteverify endpoint: FRC_SITEVERIFY_ENDPOINT is
still accepted, its path is stripped, and FRC_API_ENDPOINT wins when both are
set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from pydantic_settings import BaseSettings, SettingsConfigDict

from friendly_captcha.errors import ConfigurationError

GLOBAL_API_ENDPOINT = "https://global.frcapi.com"
EU_API_ENDPOINT = "https://eu.frcapi.com"
SITEVERIFY_PATH = "/api/v2/captcha/siteverify"

DEFAULT_TIMEOUT_SECONDS = 5.0

_SHORTHAND_ENDPOINTS = {
    "global": GLOBAL_API_ENDPOINT,
    "eu": EU_API_ENDPOINT,
}


def resolve_api_endpoint(api_endpoint: str) -> str:
    """Resolve ``"global"``/``"eu"`` shorthands; any other value is used verbatim."""
    if api_endpoint == "":
        raise ConfigurationError("api_endpoint must not be empty")
    return _SHORTHAND_ENDPOINTS.get(api_endpoint, api_endpoint)


def api_endpoint_from_siteverify_url(siteverify_endpoint: str) -> str:
    """Reduce a full siteverify URL to ``scheme://host[:port]``.

    Legacy configuration path: older integrations passed the complete
    siteverify URL rather than the API domain.
    """
    if siteverify_endpoint == "":
        raise ConfigurationError("siteverify_endpoint must not be empty")
    if siteverify_endpoint in _SHORTHAND_ENDPOINTS:
        return resolve_api_endpoint(siteverify_endpoint)

    try:
        parts = urlsplit(siteverify_endpoint)
    except ValueError as e:
        raise ConfigurationError(
            f"invalid siteverify_endpoint URL: {e}",
            details={"siteverify_endpoint": siteverify_endpoint},
        ) from e
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(
            "invalid siteverify_endpoint URL: scheme and host are required",
            details={"siteverify_endpoint": siteverify_endpoint},
        )
    return resolve_api_endpoint(f"{parts.scheme}://{parts.netloc}")


@dataclass(frozen=True)
class ClientConfig:
    """Read-only after construction; safe to share across concurrent calls."""

    api_key: str
    sitekey: str = ""
    api_endpoint: str = GLOBAL_API_ENDPOINT
    # Only strictly verified responses are accepted when True.
    strict: bool = False
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("api_key must not be empty")
        if not self.api_endpoint:
            raise ConfigurationError("api_endpoint must not be empty")

    @property
    def siteverify_url(self) -> str:
        return self.api_endpoint.rstrip("/") + SITEVERIFY_PATH

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', sitekey={self.sitekey!r}, "
            f"api_endpoint={self.api_endpoint!r}, strict={self.strict!r}, "
            f"timeout={self.timeout!r})"
        )


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FRC_", env_file=".env", extra="ignore", frozen=True
    )

    api_key: str = ""
    sitekey: str = ""
    api_endpoint: Optional[str] = None
    # Deprecated: full siteverify URL, path is stripped
    siteverify_endpoint: Optional[str] = None
    strict: bool = False
    timeout: float = DEFAULT_TIMEOUT_SECONDS


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: str = "INFO"
    # Unset means "json" in production, "console" otherwise
    log_format: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def resolved_log_format(self) -> str:
        if self.log_format:
            return self.log_format
        return "json" if self.is_production else "console"
