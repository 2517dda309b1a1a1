"""Core components."""

from .enums import Environment, HTTPMethod, LinkRelation
from .exceptions import (
    DecodeError,
    EndOfList,
    IdRequiredError,
    LingotekError,
    ServerError,
    TransportError,
)

__all__ = [
    "Environment",
    "HTTPMethod",
    "LinkRelation",
    "LingotekError",
    "EndOfList",
    "TransportError",
    "ServerError",
    "DecodeError",
    "IdRequiredError",
]
