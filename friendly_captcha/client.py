"""
Friendly Captcha API client.

See the API docs at https://developer.friendlycaptcha.com. Build a client with
ClientBuilder (or ClientBuilder.from_settings()) and reuse it across requests;
it holds no per-call state.
"""

from __future__ import annotations

from typing import Any, Optional

from friendly_captcha.config import ClientConfig
from friendly_captcha.infrastructure.captcha.protocol import CaptchaVerifier
from friendly_captcha.infrastructure.captcha.siteverify import SiteverifyExecutor
from friendly_captcha.infrastructure.http_client import HttpClient
from friendly_captcha.result import VerifyResult

# The form field the widget puts the captcha response in by default.
RESPONSE_FORM_FIELD_NAME = "frc-captcha-response"


class FriendlyCaptchaClient:
    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[HttpClient] = None,
        verifier: Optional[CaptchaVerifier] = None,
    ) -> None:
        self._config = config
        self._owns_http = http_client is None
        self._http = (
            http_client if http_client is not None else HttpClient(config.timeout)
        )
        self._verifier: CaptchaVerifier = (
            verifier if verifier is not None else SiteverifyExecutor(config, self._http)
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def strict(self) -> bool:
        return self._config.strict

    async def verify_captcha_response(
        self, captcha_response: str, *, timeout: Optional[float] = None
    ) -> VerifyResult:
        """Verify a widget response with the Friendly Captcha API.

        Never raises for network or API failures: inspect the returned
        VerifyResult instead. ``timeout`` (seconds) overrides the client
        default for this call only.
        """
        outcome = await self._verifier.verify(captcha_response, timeout=timeout)
        return VerifyResult(outcome=outcome, strict=self._config.strict)

    async def aclose(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "FriendlyCaptchaClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"FriendlyCaptchaClient({self._config!r})"
