"""Curated entries from the official Starlight documentation."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from awesome_starlight.adapters.http_resilience import ResilientClient
from awesome_starlight.domain.model import Category
from awesome_starlight.domain.ports.fetching import SourceFetchError

from .parsers import CardParser, LinkCardParser, ThemeGridParser, VideoGridParser

if TYPE_CHECKING:
    from collections.abc import Callable

    from awesome_starlight.config.http_resilience import ResilienceConfig
    from awesome_starlight.config.sources import SourcesConfig
    from awesome_starlight.domain.model import CandidateItem

log = getLogger(__name__)


async def fetch_official_sources(
    config: SourcesConfig,
    *,
    client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
) -> dict[Category, list[CandidateItem]]:
    """Fetch the four curated documents concurrently and parse them by category.

    Raises ``SourceFetchError`` if any document is unavailable: a catalog
    without its curated entries must not replace the published one.
    """

    factory = client_factory or ResilientClient
    async with factory(config.documents) as client:
        plugins, themes, community, showcases = await asyncio.gather(
            _fetch_document(client, config.plugins_url),
            _fetch_document(client, config.themes_url),
            _fetch_document(client, config.community_url),
            _fetch_document(client, config.showcases_url),
        )

    official = {
        Category.PLUGIN: LinkCardParser().parse(plugins),
        Category.THEME: ThemeGridParser().parse(themes),
        Category.TOOL: [],
        Category.SHOWCASE: CardParser().parse(showcases),
        Category.VIDEO: VideoGridParser().parse(community),
        Category.ARTICLE: LinkCardParser().parse(community),
    }
    log.info("Fetched %s official items", sum(len(items) for items in official.values()))
    return official


async def _fetch_document(client: ResilientClient, url: str) -> str:
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise SourceFetchError(f"Failed to fetch {url}: {exc}") from exc
    return response.text
