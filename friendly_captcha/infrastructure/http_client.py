"""Shared async HTTP client with configurable timeout."""

from typing import Any, Optional

import httpx


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient with a configurable timeout.

    A caller-supplied httpx.AsyncClient is used as-is and never closed here;
    its owner controls pooling, TLS and transport.
    """

    def __init__(
        self, timeout: float = 5.0, client: Optional[httpx.AsyncClient] = None
    ) -> None:
        self._owns_client = client is None
        self._client = (
            client if client is not None else httpx.AsyncClient(timeout=timeout)
        )

    def build_request(
        self, method: str, url: str, *, timeout: Optional[float] = None, **kwargs: Any
    ) -> httpx.Request:
        if timeout is not None:
            kwargs["timeout"] = timeout
        return self._client.build_request(method, url, **kwargs)

    async def send(self, request: httpx.Request) -> httpx.Response:
        return await self._client.send(request)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
