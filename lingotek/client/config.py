"""Shared Lingotek client constants.

This module centralizes base URLs, paging defaults and header values used by
the transport and the client so the rest of the package can stay small and
focused.
"""

from __future__ import annotations

from .core import Environment

# Deployment-specific REST base URLs (routes are appended verbatim)
BASE_URLS = {
    Environment.SANDBOX: "https://sandbox-api.lingotek.com/api/",
    Environment.PRODUCTION: "https://myaccount.lingotek.com/api/",
}

# Cursor values used to seed every collection walk
DEFAULT_PAGE_LIMIT = 10
DEFAULT_PAGE_OFFSET = 0

DEFAULT_TIMEOUT = 30.0

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=utf-8"

DOWNLOAD_CHUNK_SIZE = 64 * 1024

# Environment variables read by LingotekClient.from_env()
ACCESS_TOKEN_ENV = "LINGOTEK_ACCESS_TOKEN"
ENVIRONMENT_ENV = "LINGOTEK_ENVIRONMENT"


def get_base_url(environment: Environment | str = Environment.SANDBOX) -> str:
    """Get the REST base URL for a deployment.

    Args:
        environment: Deployment (enum member or its string value)

    Returns:
        Base URL string ending with a slash

    Examples:
        >>> get_base_url(Environment.SANDBOX)
        'https://sandbox-api.lingotek.com/api/'
        >>> get_base_url("production")
        'https://myaccount.lingotek.com/api/'
    """
    return BASE_URLS[Environment(environment)]
