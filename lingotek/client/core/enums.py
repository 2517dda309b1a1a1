"""Core enumerations shared across the client.

Key Types:
    - Environment: Which Lingotek deployment to talk to
    - LinkRelation: Classification of a hypermedia link
    - HTTPMethod: Request methods used by the transport
"""

from enum import Enum


class Environment(str, Enum):
    """Lingotek API deployments."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"


class LinkRelation(str, Enum):
    """Relation of a hypermedia link, derived from its first ``rel`` tag."""

    SELF = "self"
    NEXT = "next"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str | None) -> "LinkRelation":
        """Map a raw ``rel`` tag onto a relation, unknown tags become OTHER."""
        if tag == cls.SELF.value:
            return cls.SELF
        if tag == cls.NEXT.value:
            return cls.NEXT
        return cls.OTHER


class HTTPMethod(str, Enum):
    """HTTP methods issued by the transport."""

    GET = "GET"
    POST = "POST"

    @property
    def is_write(self) -> bool:
        return self is HTTPMethod.POST
