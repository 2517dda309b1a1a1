"""REST transport: credentials, content types and request dispatch."""

from __future__ import annotations

from typing import Any, BinaryIO, Protocol

from ...config import DEFAULT_TIMEOUT, FORM_CONTENT_TYPE
from ...core import HTTPMethod
from .http_client import HTTPClient


class CredentialProvider(Protocol):
    """Supplies the Authorization header value attached to every request."""

    def authorization(self) -> str: ...


class BearerToken:
    """Static OAuth access token credential."""

    def __init__(self, access_token: str) -> None:
        self._access_token = access_token

    def authorization(self) -> str:
        return f"bearer {self._access_token}"

    def __repr__(self) -> str:
        return "BearerToken(***)"


class RESTTransport:
    """Thin wrapper over HTTPClient that adds auth and form encoding.

    The transport holds no per-request state, so any number of streams may
    share one instance.
    """

    def __init__(
        self,
        base_url: str,
        credentials: CredentialProvider,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        http: HTTPClient | None = None,
    ) -> None:
        self._http = http or HTTPClient(base_url=base_url, timeout=timeout)
        self._credentials = credentials

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def _headers(self, method: HTTPMethod) -> dict[str, str]:
        headers = {"Authorization": self._credentials.authorization()}
        if method.is_write:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        return headers

    async def request(
        self,
        path: str,
        query: dict[str, str] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
    ) -> bytes:
        """Send ``query`` to ``path`` and return the raw response body.

        GET sends the parameters as the query string, POST as a form body.

        Raises:
            TransportError: On network failure
            ServerError: On a status code >= 400
        """
        method = HTTPMethod(method)
        headers = self._headers(method)
        if method.is_write:
            return await self._http.request(method.value, path, data=query or {}, headers=headers)
        return await self._http.request(method.value, path, params=query, headers=headers)

    async def get(self, path: str, params: dict[str, str] | None = None) -> bytes:
        return await self.request(path, params, HTTPMethod.GET)

    async def post(self, path: str, form: dict[str, str] | None = None) -> bytes:
        return await self.request(path, form, HTTPMethod.POST)

    async def download(
        self,
        path: str,
        writer: BinaryIO | Any,
        query: dict[str, str] | None = None,
    ) -> int:
        """Stream the body of ``path`` into ``writer`` and return its length."""
        return await self._http.download(
            path, writer, params=query, headers=self._headers(HTTPMethod.GET)
        )

    async def close(self) -> None:
        await self._http.close()
