"""Document, locale and status data models.

A document arrives as ``{"properties": {...}, "entities": [locale, status]}``;
the two sub-entities are lifted onto ``locale`` and ``status``.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    model_validator,
)

from .common import LingoTime, is_wire
from .link import Link


class LocaleProperty(BaseModel):
    code: str = ""
    # The API spells this key "lanuage_code"
    language_code: str = Field(
        default="", validation_alias=AliasChoices("lanuage_code", "language_code")
    )
    country_code: str = ""
    title: str = ""
    language: str = ""
    country: str = ""

    model_config = ConfigDict(frozen=True)


class Locale(BaseModel):
    properties: LocaleProperty = Field(default_factory=LocaleProperty)
    rel: list[str] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class StatusCountPart(BaseModel):
    total: int = 0
    unique: int = 0

    model_config = ConfigDict(frozen=True)


class StatusCount(BaseModel):
    segment: StatusCountPart = Field(default_factory=StatusCountPart)
    word: StatusCountPart = Field(default_factory=StatusCountPart)
    format_tag: StatusCountPart = Field(default_factory=StatusCountPart)

    model_config = ConfigDict(frozen=True)


class StatusProperty(BaseModel):
    title: str = ""
    id: str = ""
    progress: int = 0
    count: StatusCount = Field(default_factory=StatusCount)

    model_config = ConfigDict(frozen=True)


class Status(BaseModel):
    """Processing status of a document, also returned by uploads."""

    properties: StatusProperty = Field(default_factory=StatusProperty)
    links: list[Link] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DocumentProperty(BaseModel):
    project_id: str = ""
    upload_date: LingoTime | None = None
    title: str = ""
    external_url: str = ""
    name: str = ""
    id: str = ""
    extension: str = ""

    model_config = ConfigDict(frozen=True)


class Document(BaseModel):
    """An uploaded source document with its locale and status."""

    properties: DocumentProperty = Field(default_factory=DocumentProperty)
    locale: Locale = Field(default_factory=Locale)
    status: Status = Field(default_factory=Status)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _lift_entities(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        if "entities" not in data:
            # Direct construction may omit them; API payloads may not
            if is_wire(info):
                raise ValueError("document payload has no entities")
            return data
        entities = data["entities"]
        if not isinstance(entities, list) or len(entities) < 2:
            raise ValueError("document entities must hold a locale and a status")
        lifted = {k: v for k, v in data.items() if k != "entities"}
        lifted["locale"] = entities[0]
        lifted["status"] = entities[1]
        return lifted

    @property
    def id(self) -> str:
        return self.properties.id
