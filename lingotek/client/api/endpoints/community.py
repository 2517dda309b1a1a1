"""Community endpoints."""

from __future__ import annotations

from typing import Any

from ...models import Community
from ..spec import CollectionSpec, EntityAdapter

ADAPTER = EntityAdapter(Community)


def build_path(params: dict[str, Any]) -> str:
    return "community"


def entity_path(community_id: str) -> str:
    return f"community/{community_id}"


SPEC = CollectionSpec(
    id="communities",
    build_path=build_path,
    decoder=ADAPTER.parse_many,
)
