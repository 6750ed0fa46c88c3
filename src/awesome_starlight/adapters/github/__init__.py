"""Public interface for the GitHub adapter."""

from __future__ import annotations

from .client import GitHubAPIError, GitHubClient
from .schema import ContentEntry, RepositoryPayload, ShowcaseDocument
from .showcase import ShowcaseParser, fetch_showcase_candidates

__all__ = [
    "ContentEntry",
    "GitHubAPIError",
    "GitHubClient",
    "RepositoryPayload",
    "ShowcaseDocument",
    "ShowcaseParser",
    "fetch_showcase_candidates",
]
