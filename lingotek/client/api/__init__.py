"""Public client API."""

from .client import LingotekClient
from .endpoints import get_collection_spec, list_collections
from .spec import CollectionSpec, EntityAdapter

__all__ = [
    "LingotekClient",
    "CollectionSpec",
    "EntityAdapter",
    "get_collection_spec",
    "list_collections",
]
