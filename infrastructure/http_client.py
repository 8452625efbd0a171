"""Shared async HTTP client for outbound calls (email API)."""

from typing import Any, Optional

import httpx

_USER_AGENT = "realty-backend/1.0"


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient.

    Callers get a per-client timeout and a fixed User-Agent; exceptions from
    httpx propagate so providers can decide how to report them.
    """

    def __init__(
        self, timeout: float = 10.0, headers: Optional[dict[str, str]] = None
    ) -> None:
        default_headers = {"User-Agent": _USER_AGENT}
        if headers:
            default_headers.update(headers)
        self._client = httpx.AsyncClient(timeout=timeout, headers=default_headers)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._client.post(url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
