"""Collection specs and entity adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..core import DecodeError
from ..models import WIRE_CONTEXT
from ..runtime import EntityDecoder

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class CollectionSpec(Generic[T]):
    id: str
    build_path: Callable[[dict[str, Any]], str]
    decoder: EntityDecoder[T]
    build_query: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # Params that must hold a non-empty entity id
    required: tuple[str, ...] = ()


class EntityAdapter(Generic[M]):
    """Decodes entity payloads into a pydantic model."""

    def __init__(self, model: type[M]) -> None:
        self.model = model
        self._many = TypeAdapter(list[model])

    def parse_many(self, block: Any) -> list[M]:
        """Decode a page's entity block, keeping order and count."""
        try:
            return self._many.validate_python(block, context=WIRE_CONTEXT)
        except ValidationError as e:
            raise DecodeError(f"Malformed {self.model.__name__} entities: {e}") from e

    def parse_one(self, raw: bytes | str) -> M:
        """Decode a response body holding a single entity."""
        try:
            return self.model.model_validate_json(raw, context=WIRE_CONTEXT)
        except ValidationError as e:
            raise DecodeError(f"Malformed {self.model.__name__}: {e}") from e
