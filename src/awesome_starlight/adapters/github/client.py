"""HTTP client for the GitHub REST API."""

from __future__ import annotations

import asyncio
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from awesome_starlight.adapters.http_resilience import ResilientClient
from awesome_starlight.domain.ports.validation import ProbeError, RepositoryLookup

from .schema import CONTENT_LISTING, ContentEntry, RepositoryPayload

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from awesome_starlight.config.github import GitHubConfig
    from awesome_starlight.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class GitHubAPIError(RuntimeError):
    """Raised when the GitHub API returns an unexpected response."""


class GitHubClient:
    """Repository lookups, directory listings and raw file downloads."""

    def __init__(
        self,
        *,
        config: GitHubConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient

    async def fetch_repository(self, owner: str, repo: str) -> RepositoryLookup:
        """Look up one repository without retrying, reporting the raw status."""

        try:
            async with self._client_factory(self._config.validation_resilience) as client:
                response = await client.get(f"repos/{owner}/{repo}")
        except httpx.HTTPError as exc:
            raise ProbeError(f"GitHub request failed for {owner}/{repo}: {exc}") from exc

        if response.status_code != HTTPStatus.OK:
            return RepositoryLookup(status_code=response.status_code)
        try:
            payload = RepositoryPayload.model_validate_json(response.content)
        except ValidationError as exc:
            raise ProbeError(f"Unexpected repository payload for {owner}/{repo}") from exc
        return RepositoryLookup(status_code=response.status_code, fork=payload.fork)

    async def list_directory(self, path: str) -> list[ContentEntry]:
        async with self._client_factory(self._config.resilience) as client:
            response = await client.get(path)
        response.raise_for_status()

        try:
            return CONTENT_LISTING.validate_json(response.content)
        except ValidationError as exc:
            raise GitHubAPIError(f"Unexpected GitHub contents payload for {path}") from exc

    async def fetch_texts(self, urls: Sequence[str]) -> list[str | None]:
        """Download files concurrently; a failed download yields ``None``."""

        async with self._client_factory(self._config.resilience) as client:
            return list(await asyncio.gather(*(_fetch_text(client, url) for url in urls)))


async def _fetch_text(client: ResilientClient, url: str) -> str | None:
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        log.debug("Failed to download %s: %s", url, exc)
        return None
    return response.text
