"""Shared fixtures: a mock siteverify API served through httpx.MockTransport."""

from __future__ import annotations

from typing import Callable, Optional

import httpx
import pytest

from friendly_captcha import ClientBuilder, FriendlyCaptchaClient

from tests.payloads import SUCCESS_BODY


class MockSiteverify:
    """Records every request and answers through a configurable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=SUCCESS_BODY)
        )

    def respond(self, status_code: int = 200, **kwargs) -> None:
        self._handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self._handler = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def siteverify() -> MockSiteverify:
    return MockSiteverify()


@pytest.fixture
def make_client(siteverify):
    """Factory building a FriendlyCaptchaClient wired to the mock API."""

    def _make(
        *, strict: bool = False, sitekey: str = "", api_endpoint: Optional[str] = None
    ) -> FriendlyCaptchaClient:
        builder = (
            ClientBuilder()
            .with_api_key("test-key")
            .with_sitekey(sitekey)
            .with_strict_mode(strict)
            .with_http_client(siteverify.http_client())
        )
        if api_endpoint is not None:
            builder.with_api_endpoint(api_endpoint)
        return builder.build()

    return _make
