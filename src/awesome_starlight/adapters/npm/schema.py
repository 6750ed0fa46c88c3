"""Pydantic models describing the npm registry search payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class NpmBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PackageLinks(NpmBaseModel):
    homepage: str | None = None
    repository: str | None = None
    npm: str | None = None

    _normalize_links = field_validator("homepage", "repository", "npm", mode="before")(
        _blank_to_none
    )


class PackagePayload(NpmBaseModel):
    name: str
    description: str | None = None
    keywords: list[str] = Field(default_factory=list[str])
    links: PackageLinks = Field(default_factory=PackageLinks)

    @field_validator("keywords", mode="before")
    @classmethod
    def _coerce_keywords(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def homepage(self) -> str | None:
        return self.links.homepage or self.links.repository


class SearchObject(NpmBaseModel):
    package: PackagePayload


class SearchResponse(NpmBaseModel):
    objects: list[SearchObject] = Field(default_factory=list[SearchObject])
    total: int = 0
