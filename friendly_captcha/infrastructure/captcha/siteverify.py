"""Friendly Captcha siteverify implementation of CaptchaVerifier.

One call sends exactly one POST and maps whatever happens to a
VerificationOutcome. Nothing is raised for network, HTTP or decode failures;
caller cancellation propagates untouched.
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from friendly_captcha.config import ClientConfig
from friendly_captcha.infrastructure.http_client import HttpClient
from friendly_captcha.schemas.outcome import (
    ClientFailure,
    Decoded,
    EncodingFailure,
    TransportFailure,
    VerificationOutcome,
)
from friendly_captcha.schemas.wire import VerifyRequest, VerifyResponse
from friendly_captcha.shared.logging import get_logger
from friendly_captcha.version import sdk_header_value

log = get_logger(__name__)


class SiteverifyExecutor:
    def __init__(self, config: ClientConfig, http_client: HttpClient) -> None:
        self._config = config
        self._http = http_client

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Api-Key": self._config.api_key,
            "X-Frc-Sdk": sdk_header_value(),
        }

    def _build_request(self, token: str, timeout: Optional[float]) -> httpx.Request:
        body = VerifyRequest(response=token, sitekey=self._config.sitekey).to_json()
        return self._http.build_request(
            "POST",
            self._config.siteverify_url,
            content=body,
            headers=self._headers(),
            timeout=timeout,
        )

    async def verify(
        self, token: str, *, timeout: Optional[float] = None
    ) -> VerificationOutcome:
        try:
            request = self._build_request(token, timeout)
        except (ValueError, TypeError, httpx.InvalidURL) as e:
            log.error(
                "siteverify_encoding_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return EncodingFailure(cause=e)

        try:
            response = await self._http.send(request)
        except httpx.HTTPError as e:
            log.error(
                "siteverify_request_failed",
                url=self._config.siteverify_url,
                error=str(e),
                error_type=type(e).__name__,
            )
            return TransportFailure(cause=e)

        try:
            body = VerifyResponse.model_validate_json(response.content)
        except ValidationError as e:
            # The API is answering, but not with anything we understand
            log.error(
                "siteverify_response_undecodable",
                status_code=response.status_code,
                response_text=response.text[:200],
                error_count=e.error_count(),
            )
            return TransportFailure(cause=e, http_status=response.status_code)

        if response.status_code != 200:
            error = body.error
            log.error(
                "siteverify_client_error",
                status_code=response.status_code,
                error_code=error.error_code if error else None,
                detail=error.detail if error else None,
            )
            return ClientFailure(http_status=response.status_code, response=body)

        if not body.success:
            log.warning(
                "siteverify_verification_failed",
                error_code=body.error.error_code if body.error else None,
            )
        else:
            log.debug(
                "siteverify_verification_succeeded",
                event_id=body.data.event_id if body.data else None,
            )
        return Decoded(response=body)
