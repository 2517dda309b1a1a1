"""Page envelope model for paginated collection responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core import DecodeError
from .link import Link


class PageSummary(BaseModel):
    """Count summary of one fetched page.

    ``size`` is the number of entities in this page, ``total`` the size of
    the whole collection as known when the page was served.
    """

    title: str = ""
    offset: int = 0
    total: int = 0
    limit: int = 0
    size: int = 0

    model_config = ConfigDict(frozen=True)


class PageEnvelope(BaseModel):
    """One fetched page: summary, not-yet-decoded entities and links."""

    classes: list[str] = Field(default_factory=list, alias="class")
    properties: PageSummary = Field(default_factory=PageSummary)
    entities: Any = None
    links: list[Link] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def summary(self) -> PageSummary:
        return self.properties

    @classmethod
    def decode(cls, raw: bytes | str) -> PageEnvelope:
        """Parse a raw response body into an envelope.

        Raises:
            DecodeError: If the body is not JSON or does not have the
                envelope's shape
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(f"Malformed page envelope: {e}") from e
