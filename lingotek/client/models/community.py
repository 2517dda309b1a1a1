"""Community data model."""

from pydantic import BaseModel, ConfigDict, Field

from .common import Action
from .link import Link


class CommunityProperty(BaseModel):
    title: str = ""
    id: str = ""

    model_config = ConfigDict(frozen=True)


class Community(BaseModel):
    """A Lingotek community (top-level tenant)."""

    actions: list[Action] = Field(default_factory=list)
    properties: CommunityProperty = Field(default_factory=CommunityProperty)
    rel: list[str] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def id(self) -> str:
        return self.properties.id
