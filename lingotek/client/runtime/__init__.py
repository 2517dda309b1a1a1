"""Runtime: cursor resolution, REST transport and page streams.

Architecture:
    - cursor.py: seed envelope and next-page resolution
    - rest/: aiohttp client, authenticated transport, page fetcher
    - stream.py: the producer/consumer page walk
    - telemetry.py: structured logging
"""

from __future__ import annotations

from .cursor import CursorRequest, resolve_next, seed_envelope
from .rest import BearerToken, CredentialProvider, HTTPClient, PageFetcher, RESTTransport
from .stream import (
    EntityDecoder,
    ErrorChannel,
    ItemChannel,
    PageStream,
    StopReason,
    StreamState,
)

__all__ = [
    "CursorRequest",
    "resolve_next",
    "seed_envelope",
    "HTTPClient",
    "RESTTransport",
    "CredentialProvider",
    "BearerToken",
    "PageFetcher",
    "EntityDecoder",
    "ErrorChannel",
    "ItemChannel",
    "PageStream",
    "StopReason",
    "StreamState",
]
