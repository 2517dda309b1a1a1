"""Data models for Lingotek API resources.

Architecture:
    This module exports all Pydantic v2 data models used throughout the
    client. All models are immutable (frozen=True); a page envelope is
    replaced by its successor, never mutated.

Model Categories:
    - Paging: Link, PageSummary, PageEnvelope
    - Resources: Community, Project, Document, Locale, Status, Translation
    - Shared: Action, ActionField, Messages, LingoTime, WIRE_CONTEXT
"""

from .common import WIRE_CONTEXT, Action, ActionField, LingoTime, Messages
from .community import Community, CommunityProperty
from .document import (
    Document,
    DocumentProperty,
    Locale,
    LocaleProperty,
    Status,
    StatusCount,
    StatusCountPart,
    StatusProperty,
)
from .envelope import PageEnvelope, PageSummary
from .link import Link, classify, parse_target
from .project import Project, ProjectProperty
from .translation import Translation, TranslationProperty

__all__ = [
    "Action",
    "ActionField",
    "Community",
    "CommunityProperty",
    "Document",
    "DocumentProperty",
    "LingoTime",
    "Link",
    "Locale",
    "LocaleProperty",
    "Messages",
    "PageEnvelope",
    "PageSummary",
    "Project",
    "ProjectProperty",
    "Status",
    "StatusCount",
    "StatusCountPart",
    "StatusProperty",
    "Translation",
    "TranslationProperty",
    "WIRE_CONTEXT",
    "classify",
    "parse_target",
]
