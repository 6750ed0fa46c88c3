"""HTTP client for the npm registry search API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from awesome_starlight.adapters.http_resilience import ResilientClient
from awesome_starlight.domain.model import CandidateItem

from .schema import PackagePayload, SearchResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from awesome_starlight.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

SEARCH_PATH = "-/v1/search"
STARLIGHT_MARKER = "starlight"
OFFICIAL_STARLIGHT_SCOPE = "@astrojs/starlight"


class NpmRegistryError(RuntimeError):
    """Raised when the registry returns an unexpected response."""


class NpmRegistryClient:
    def __init__(
        self,
        *,
        resilience: ResilienceConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._resilience = resilience
        self._client_factory = client_factory or ResilientClient

    async def search(self, text: str, *, size: int = 250) -> SearchResponse:
        async with self._client_factory(self._resilience) as client:
            response = await client.get(SEARCH_PATH, params={"text": text, "size": str(size)})
        response.raise_for_status()

        try:
            return SearchResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise NpmRegistryError(f"Unexpected npm search payload for {text!r}") from exc


async def fetch_registry_candidates(
    client: NpmRegistryClient,
    *,
    queries: Sequence[str],
    size: int = 250,
) -> list[CandidateItem]:
    """Search the registry for Starlight packages; failures contribute nothing."""

    try:
        responses = await asyncio.gather(*(client.search(query, size=size) for query in queries))
    except (httpx.HTTPError, NpmRegistryError) as exc:
        log.warning("npm registry search failed: %s", exc)
        return []

    packages: dict[str, PackagePayload] = {}
    for response in responses:
        for result in response.objects:
            package = result.package
            if STARLIGHT_MARKER in package.name or package.name.startswith(
                OFFICIAL_STARLIGHT_SCOPE
            ):
                packages[package.name] = package

    log.info("Found %s raw npm candidates", len(packages))
    return [_to_candidate(package) for package in packages.values()]


def _to_candidate(package: PackagePayload) -> CandidateItem:
    return CandidateItem.create(
        title=package.name,
        url=package.homepage,
        description=package.description,
        keywords=package.keywords,
    )
