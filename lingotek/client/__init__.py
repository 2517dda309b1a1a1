"""Lingotek Client - async streaming client for the Lingotek REST API."""

from .api import LingotekClient
from .core import (
    DecodeError,
    EndOfList,
    Environment,
    IdRequiredError,
    LingotekError,
    LinkRelation,
    ServerError,
    TransportError,
)
from .models import (
    Community,
    Document,
    Link,
    Locale,
    PageEnvelope,
    PageSummary,
    Project,
    Status,
    Translation,
)
from .runtime import BearerToken, CursorRequest, PageStream, StopReason, resolve_next

__version__ = "0.1.0"

__all__ = [
    # Client
    "LingotekClient",
    "BearerToken",
    "Environment",
    # Streaming
    "PageStream",
    "StopReason",
    "CursorRequest",
    "resolve_next",
    # Models
    "Link",
    "LinkRelation",
    "PageEnvelope",
    "PageSummary",
    "Community",
    "Project",
    "Document",
    "Locale",
    "Status",
    "Translation",
    # Exceptions
    "LingotekError",
    "EndOfList",
    "TransportError",
    "ServerError",
    "DecodeError",
    "IdRequiredError",
]
