"""Document translation endpoints."""

from __future__ import annotations

from typing import Any

from ...models import Translation
from ..spec import CollectionSpec, EntityAdapter

ADAPTER = EntityAdapter(Translation)


def collection_path(document_id: str) -> str:
    return f"document/{document_id}/translation"


def build_path(params: dict[str, Any]) -> str:
    return collection_path(params["document_id"])


SPEC = CollectionSpec(
    id="translations",
    build_path=build_path,
    decoder=ADAPTER.parse_many,
    required=("document_id",),
)
