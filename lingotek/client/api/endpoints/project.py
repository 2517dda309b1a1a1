"""Project endpoints.

Projects are listed per community; the ``community_id`` filter rides along
on every page through the ``self`` link.
"""

from __future__ import annotations

from typing import Any

from ...models import Project
from ..spec import CollectionSpec, EntityAdapter

ADAPTER = EntityAdapter(Project)


def build_path(params: dict[str, Any]) -> str:
    return "project"


def build_query(params: dict[str, Any]) -> dict[str, str]:
    return {"community_id": str(params["community_id"])}


SPEC = CollectionSpec(
    id="projects",
    build_path=build_path,
    build_query=build_query,
    decoder=ADAPTER.parse_many,
    required=("community_id",),
)
