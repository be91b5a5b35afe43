"""Fluent builder for FriendlyCaptchaClient.

Setters record values (and configuration errors) and return the builder;
build() validates once and either raises ConfigurationError or returns a
ready client. When several endpoint setters are called the last one wins.
"""

from __future__ import annotations

import warnings
from typing import Optional

import httpx

from friendly_captcha.client import FriendlyCaptchaClient
from friendly_captcha.config import (
    DEFAULT_TIMEOUT_SECONDS,
    GLOBAL_API_ENDPOINT,
    ClientConfig,
    ClientSettings,
    api_endpoint_from_siteverify_url,
    resolve_api_endpoint,
)
from friendly_captcha.errors import ConfigurationError
from friendly_captcha.infrastructure.http_client import HttpClient
from friendly_captcha.shared.logging import get_logger

log = get_logger(__name__)


class ClientBuilder:
    def __init__(self) -> None:
        self.error: Optional[ConfigurationError] = None
        self.api_key: str = ""
        self.sitekey: str = ""
        self.api_endpoint: str = GLOBAL_API_ENDPOINT
        self.strict: bool = False
        self.timeout: float = DEFAULT_TIMEOUT_SECONDS
        self.http_client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls, settings: Optional[ClientSettings] = None) -> "ClientBuilder":
        if settings is None:
            settings = ClientSettings()
        builder = (
            cls()
            .with_api_key(settings.api_key)
            .with_sitekey(settings.sitekey)
            .with_strict_mode(settings.strict)
            .with_timeout(settings.timeout)
        )
        # An explicit API endpoint takes precedence over the deprecated setting
        if settings.siteverify_endpoint is not None:
            builder.with_siteverify_endpoint(settings.siteverify_endpoint)
        if settings.api_endpoint is not None:
            builder.with_api_endpoint(settings.api_endpoint)
        return builder

    def _fail(self, error: ConfigurationError) -> "ClientBuilder":
        if self.error is None:
            self.error = error
        return self

    def with_api_key(self, api_key: str) -> "ClientBuilder":
        self.api_key = api_key
        return self

    def with_sitekey(self, sitekey: str) -> "ClientBuilder":
        """Optional: the API checks the response was generated for this sitekey."""
        self.sitekey = sitekey
        return self

    def with_strict_mode(self, strict: bool) -> "ClientBuilder":
        """Only accept strictly verified responses.

        With strict mode on, an invalid API key or an unreachable API rejects
        every submission. Defaults to False.
        """
        self.strict = strict
        return self

    def with_api_endpoint(self, api_endpoint: str) -> "ClientBuilder":
        """Domain without path (e.g. "https://global.frcapi.com"), or "global"/"eu"."""
        try:
            self.api_endpoint = resolve_api_endpoint(api_endpoint)
        except ConfigurationError as e:
            return self._fail(e)
        return self

    def with_siteverify_endpoint(self, siteverify_endpoint: str) -> "ClientBuilder":
        """Deprecated: use with_api_endpoint(). The URL path is stripped."""
        warnings.warn(
            "with_siteverify_endpoint() is deprecated, use with_api_endpoint()",
            DeprecationWarning,
            stacklevel=2,
        )
        try:
            self.api_endpoint = api_endpoint_from_siteverify_url(siteverify_endpoint)
        except ConfigurationError as e:
            return self._fail(e)
        return self

    def with_timeout(self, timeout: float) -> "ClientBuilder":
        if timeout <= 0:
            return self._fail(
                ConfigurationError("timeout must be positive", details={"timeout": timeout})
            )
        self.timeout = timeout
        return self

    def with_http_client(self, http_client: httpx.AsyncClient) -> "ClientBuilder":
        """Use a caller-owned httpx.AsyncClient; it is not closed by the client."""
        self.http_client = http_client
        return self

    def build_config(self) -> ClientConfig:
        if self.error is not None:
            raise self.error
        if not self.api_key:
            raise ConfigurationError(
                "an API key is required: set it with with_api_key() "
                "or the FRC_API_KEY environment variable"
            )
        return ClientConfig(
            api_key=self.api_key,
            sitekey=self.sitekey,
            api_endpoint=self.api_endpoint,
            strict=self.strict,
            timeout=self.timeout,
        )

    def build(self) -> FriendlyCaptchaClient:
        config = self.build_config()
        http_client: Optional[HttpClient] = None
        if self.http_client is not None:
            # Caller-owned; the client never closes it
            http_client = HttpClient(timeout=config.timeout, client=self.http_client)
        log.debug(
            "friendly_captcha_client_created",
            api_endpoint=config.api_endpoint,
            strict=config.strict,
            sitekey_set=bool(config.sitekey),
            custom_http_client=self.http_client is not None,
        )
        return FriendlyCaptchaClient(config, http_client=http_client)
