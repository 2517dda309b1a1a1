"""Translation data model."""

from pydantic import BaseModel, ConfigDict, Field

from .link import Link


class TranslationProperty(BaseModel):
    locale_code: str = ""
    percent_complete: int = 0
    status: str = ""
    title: str = ""
    id: str = ""

    model_config = ConfigDict(frozen=True)


class Translation(BaseModel):
    """A target-locale translation of a document."""

    properties: TranslationProperty = Field(default_factory=TranslationProperty)
    rel: list[str] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
