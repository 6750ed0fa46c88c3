"""Pydantic models describing the GitHub API payloads we read."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RepositoryPayload(GitHubBaseModel):
    full_name: str | None = None
    fork: bool


class ContentEntry(GitHubBaseModel):
    name: str
    type: str = "file"
    download_url: str | None = None


CONTENT_LISTING = TypeAdapter(list[ContentEntry])


class ShowcaseDocument(GitHubBaseModel):
    """One ``.yml`` file of the Astro showcase collection."""

    title: str
    url: str
    categories: list[str] = Field(default_factory=list[str])

    @field_validator("categories", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return [] if value is None else value
