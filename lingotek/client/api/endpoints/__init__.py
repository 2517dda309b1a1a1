"""Lingotek collection registry.

This module exports the collection specifications of every resource that
can be streamed page by page.
"""

from __future__ import annotations

from typing import Any

from ..spec import CollectionSpec
from .community import SPEC as CommunitiesSpec  # noqa: N811
from .document import SPEC as DocumentsSpec  # noqa: N811
from .project import SPEC as ProjectsSpec  # noqa: N811
from .translation import SPEC as TranslationsSpec  # noqa: N811

# Registry mapping collection IDs to specs
_COLLECTION_REGISTRY: dict[str, CollectionSpec[Any]] = {
    CommunitiesSpec.id: CommunitiesSpec,
    ProjectsSpec.id: ProjectsSpec,
    DocumentsSpec.id: DocumentsSpec,
    TranslationsSpec.id: TranslationsSpec,
}


def get_collection_spec(collection_id: str) -> CollectionSpec[Any] | None:
    """Get collection specification by ID.

    Args:
        collection_id: Collection identifier (e.g., "communities", "projects")

    Returns:
        CollectionSpec if found, None otherwise
    """
    return _COLLECTION_REGISTRY.get(collection_id)


def list_collections() -> list[str]:
    """Return the IDs of all registered collections."""
    return sorted(_COLLECTION_REGISTRY)
