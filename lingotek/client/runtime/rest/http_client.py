"""HTTP client helper."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, BinaryIO

import aiohttp

from ...config import DEFAULT_TIMEOUT, DOWNLOAD_CHUNK_SIZE
from ...core import ServerError, TransportError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    Responses with a status code >= 400 raise ServerError carrying the raw
    body; connection failures and timeouts raise TransportError. Nothing is
    retried.
    """

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> bytes:
        """Issue a request and return the raw response body."""
        url = self._url(url)
        logger.debug("%s %s params=%s", method, url, params)
        try:
            async with self.session.request(
                method, url, params=params, data=data, headers=headers
            ) as response:
                body = await response.read()
                self._raise_for_status(response.status, body, method, url)
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> bytes:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> bytes:
        """POST request with a form body."""
        return await self.request("POST", url, data=data, headers=headers)

    async def download(
        self,
        url: str,
        writer: BinaryIO | Any,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        chunk_size: int = DOWNLOAD_CHUNK_SIZE,
    ) -> int:
        """Stream a GET response body into ``writer``.

        ``writer.write`` may be a plain or a coroutine function.

        Returns:
            Number of bytes written
        """
        url = self._url(url)
        logger.debug("GET %s params=%s (download)", url, params)
        written = 0
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                if response.status >= 400:
                    body = await response.read()
                    self._raise_for_status(response.status, body, "GET", url)
                async for chunk in response.content.iter_chunked(chunk_size):
                    result = writer.write(chunk)
                    if inspect.isawaitable(result):
                        await result
                    written += len(chunk)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        return written

    @staticmethod
    def _raise_for_status(status: int, body: bytes, method: str, url: str) -> None:
        if status >= 400:
            raise ServerError(
                f"Server returned an error: {method} {url} -> {status}",
                status_code=status,
                body=body,
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
