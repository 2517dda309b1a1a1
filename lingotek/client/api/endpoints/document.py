"""Document endpoints."""

from __future__ import annotations

from typing import Any

from ...models import Document, Status
from ..spec import CollectionSpec, EntityAdapter

ADAPTER = EntityAdapter(Document)
STATUS_ADAPTER = EntityAdapter(Status)


def build_path(params: dict[str, Any]) -> str:
    return "document"


def entity_path(document_id: str) -> str:
    return f"document/{document_id}"


def content_path(document_id: str) -> str:
    return f"document/{document_id}/content"


SPEC = CollectionSpec(
    id="documents",
    build_path=build_path,
    decoder=ADAPTER.parse_many,
)
