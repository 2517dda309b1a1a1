"""REST runtime abstractions."""

from .fetcher import PageFetcher
from .http_client import HTTPClient
from .transport import BearerToken, CredentialProvider, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "CredentialProvider",
    "BearerToken",
    "PageFetcher",
]
