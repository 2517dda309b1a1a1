"""Page fetching: one cursor request in, one decoded envelope out."""

from __future__ import annotations

from time import perf_counter

from ...models import PageEnvelope
from ..cursor import CursorRequest
from ..telemetry import log_page_fetched
from .transport import RESTTransport


class PageFetcher:
    """Fetches and decodes single pages of a collection."""

    def __init__(self, transport: RESTTransport) -> None:
        self._transport = transport

    async def fetch(self, request: CursorRequest) -> PageEnvelope:
        """GET the page described by ``request``.

        Raises:
            TransportError: On network failure
            ServerError: On a status code >= 400
            DecodeError: If the body is not a page envelope
        """
        start = perf_counter()
        raw = await self._transport.get(request.path, request.query)
        envelope = PageEnvelope.decode(raw)
        log_page_fetched(
            path=request.path,
            offset=request.offset,
            size=envelope.summary.size,
            total=envelope.summary.total,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return envelope

    async def fetch_page(self, path: str, query: dict[str, str] | None = None) -> PageEnvelope:
        """Fetch one page directly, without a preceding envelope."""
        return await self.fetch(CursorRequest(path=path, query=dict(query or {})))
