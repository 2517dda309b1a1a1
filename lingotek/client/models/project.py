"""Project data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import LingoTime
from .link import Link


class ProjectProperty(BaseModel):
    creation_date: LingoTime | None = None
    workflow_id: str = ""
    callback_url: str = ""
    due_date: LingoTime | None = None
    title: str = ""
    community_id: str = ""
    id: str = ""

    model_config = ConfigDict(frozen=True)


class Project(BaseModel):
    """A project groups documents inside a community."""

    properties: ProjectProperty = Field(default_factory=ProjectProperty)
    rel: list[str] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def id(self) -> str:
        return self.properties.id

    @property
    def created_at(self) -> datetime | None:
        return self.properties.creation_date
