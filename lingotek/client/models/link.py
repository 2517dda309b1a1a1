"""Hypermedia link model."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field
from yarl import URL

from ..core import LinkRelation


class Link(BaseModel):
    """A typed reference to a related resource or page.

    ``href`` is a route relative to the API base URL plus an encoded query
    string, e.g. ``community?limit=10&offset=10``.
    """

    rel: list[str] = Field(default_factory=list)
    href: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def relation(self) -> LinkRelation:
        """Relation derived from the first ``rel`` tag only."""
        return LinkRelation.from_tag(self.rel[0] if self.rel else None)

    def parse_target(self) -> tuple[str, dict[str, str]]:
        """Split ``href`` into its path and query parameters.

        For repeated query keys the last value wins.
        """
        url = URL(self.href)
        query: dict[str, str] = {}
        for key, value in url.query.items():
            query[key] = value
        return url.path, query

    @classmethod
    def build(
        cls, relation: LinkRelation, path: str, query: Mapping[str, str] | None = None
    ) -> Link:
        """Create a link pointing at ``path`` with ``query`` encoded in key order."""
        params = dict(sorted((query or {}).items()))
        href = str(URL(path).with_query(params)) if params else path
        return cls(rel=[relation.value], href=href)


def classify(link: Link) -> LinkRelation:
    """Classify a link as self, next or other."""
    return link.relation


def parse_target(link: Link) -> tuple[str, dict[str, str]]:
    """Return ``(path, query)`` for a link's target."""
    return link.parse_target()
