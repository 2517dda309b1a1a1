"""Shared building blocks for entity models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationInfo


def _from_millis(value: Any) -> Any:
    # Lingotek sends microsecond-precision epoch values in milliseconds
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        raise ValueError("timestamp must be integer milliseconds")
    try:
        millis = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError("timestamp must be integer milliseconds") from e
    return datetime.fromtimestamp(millis // 1000, tz=UTC)


LingoTime = Annotated[datetime, BeforeValidator(_from_millis)]

# Validation context marking payloads decoded from API responses
WIRE_CONTEXT = {"wire": True}


def is_wire(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("wire"))


class ActionField(BaseModel):
    """Input field of an action form."""

    name: str = ""
    type: str = ""
    required: bool = False

    model_config = ConfigDict(frozen=True)


class Action(BaseModel):
    """Operation the server advertises on an entity."""

    name: str = ""
    method: str = ""
    href: str = ""
    title: str = ""
    type: str = ""
    fields: list[ActionField] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Messages(BaseModel):
    """Diagnostics the server includes in error bodies."""

    messages: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
