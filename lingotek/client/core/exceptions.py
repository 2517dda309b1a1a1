"""Custom exception hierarchy."""

from __future__ import annotations


class LingotekError(Exception):
    """Base exception for all library errors."""

    pass


class EndOfList(LingotekError):
    """No ``next`` link was found on a page.

    This is the expected way a collection ends. Streams treat it as a clean
    termination and never surface it to the consumer.
    """

    def __init__(self, message: str = "No next rel found") -> None:
        super().__init__(message)


class TransportError(LingotekError):
    """Network or connection failure before a response was received."""

    pass


class ServerError(LingotekError):
    """Server answered with a status code >= 400.

    The raw response body is kept so callers can surface the diagnostics the
    server put in it.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: bytes = b"",
        messages: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.messages = messages or []


class DecodeError(LingotekError):
    """Malformed page envelope or entity payload."""

    pass


class IdRequiredError(LingotekError):
    """An operation needing an entity id was given an empty one."""

    def __init__(self, message: str = "No ID given") -> None:
        super().__init__(message)
