from __future__ import annotations

import asyncio

import httpx
import pytest

from awesome_starlight.adapters.sources import fetch_official_sources
from awesome_starlight.config import get_sources_config
from awesome_starlight.domain.model import Category
from awesome_starlight.domain.ports.fetching import SourceFetchError
from tests.helpers.transport import make_client_factory

DOCUMENTS = {
    "plugins.mdx": '<LinkCard href="https://blog.example" title="starlight-blog" />',
    "themes.mdx": "themes={[{ title: 'Nova', description: 'Minimal', href: 'https://nova.dev' }]}",
    "community-content.mdx": (
        '<LinkCard href="https://article.example" title="Case study" />\n'
        "videos={[{ href: 'https://video.example', title: 'Tour', description: '' }]}"
    ),
    "showcase-sites.astro": '<Card title="Athena OS" href="https://athenaos.org" />',
}


def _handler(request: httpx.Request) -> httpx.Response:
    name = request.url.path.rsplit("/", 1)[-1]
    return httpx.Response(200, text=DOCUMENTS[name])


def test_fetch_official_sources_parses_each_document() -> None:
    official = asyncio.run(
        fetch_official_sources(get_sources_config(), client_factory=make_client_factory(_handler))
    )

    titles = {category: [item.title for item in items] for category, items in official.items()}
    assert titles == {
        Category.PLUGIN: ["starlight-blog"],
        Category.THEME: ["Nova"],
        Category.TOOL: [],
        Category.SHOWCASE: ["Athena OS"],
        Category.VIDEO: ["Tour"],
        Category.ARTICLE: ["Case study"],
    }


def test_fetch_official_sources_fails_when_a_document_is_missing() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("themes.mdx"):
            return httpx.Response(404)
        return _handler(request)

    with pytest.raises(SourceFetchError, match=r"themes\.mdx"):
        asyncio.run(
            fetch_official_sources(
                get_sources_config(),
                client_factory=make_client_factory(handler),
            )
        )
