"""Cursor resolution for ``next``-link pagination.

The resolver turns the links of one page into the request for the page that
follows it. Pagination cursors (``offset``/``limit``) come only from the
``next`` link; everything else (path and fixed filters such as
``community_id``) comes from the ``self`` link.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..config import DEFAULT_PAGE_LIMIT, DEFAULT_PAGE_OFFSET
from ..core import EndOfList, LinkRelation
from ..models import Link, PageEnvelope

CURSOR_KEYS = ("offset", "limit")


@dataclass(frozen=True)
class CursorRequest:
    """Path and query of the next page fetch.

    Attributes:
        path: Route relative to the API base URL
        query: Query parameters, cursor values included
    """

    path: str
    query: dict[str, str] = field(default_factory=dict)

    @property
    def offset(self) -> str | None:
        return self.query.get("offset")

    @property
    def limit(self) -> str | None:
        return self.query.get("limit")


def resolve_next(envelope: PageEnvelope) -> CursorRequest:
    """Compute the request for the page after ``envelope``.

    Links are processed in order, so with duplicate ``self`` or ``next``
    links the last one wins. A ``next`` link missing ``offset`` or ``limit``
    yields empty strings for them.

    Raises:
        EndOfList: If the envelope has no ``next`` link
    """
    path = ""
    query: dict[str, str] = {}
    next_found = False

    for link in envelope.links:
        relation = link.relation
        if relation is LinkRelation.SELF:
            path, self_query = link.parse_target()
            for key, value in self_query.items():
                if key not in CURSOR_KEYS:
                    query[key] = value
        elif relation is LinkRelation.NEXT:
            _, next_query = link.parse_target()
            for key in CURSOR_KEYS:
                query[key] = next_query.get(key, "")
            next_found = True

    if not next_found:
        raise EndOfList()

    return CursorRequest(path=path, query=query)


def seed_envelope(
    path: str,
    query: Mapping[str, str] | None = None,
    *,
    limit: int = DEFAULT_PAGE_LIMIT,
) -> PageEnvelope:
    """Build the synthetic page zero of a collection walk.

    Its only content is a ``self`` link and an identical ``next`` link to
    ``path`` with ``query`` plus the initial cursor, so the first real page
    is resolved exactly like every later one.
    """
    params = dict(query or {})
    params["limit"] = str(limit)
    params["offset"] = str(DEFAULT_PAGE_OFFSET)

    return PageEnvelope(
        links=[
            Link.build(LinkRelation.SELF, path, params),
            Link.build(LinkRelation.NEXT, path, params),
        ]
    )
