from __future__ import annotations

import asyncio

import httpx

from awesome_starlight.adapters.github import (
    GitHubClient,
    ShowcaseParser,
    fetch_showcase_candidates,
)
from awesome_starlight.config import get_github_config
from awesome_starlight.config.github import ASTRO_SHOWCASE_PATH
from tests.helpers.transport import make_client_factory

STARLIGHT_SITE = """\
title: Athena OS
url: https://athenaos.org
categories:
  - starlight
  - docs
"""

OTHER_SITE = """\
title: Portfolio
url: https://portfolio.example
categories: [landing-page]
"""


def test_parser_keeps_starlight_sites() -> None:
    items = ShowcaseParser().parse(STARLIGHT_SITE)

    assert [(item.title, item.url) for item in items] == [("Athena OS", "https://athenaos.org")]


def test_parser_drops_other_and_malformed_documents() -> None:
    parser = ShowcaseParser()

    assert parser.parse(OTHER_SITE) == []
    assert parser.parse("title: No categories\nurl: https://x.example\ncategories:\n") == []
    assert parser.parse("title: [unclosed") == []
    assert parser.parse("- just\n- a list\n") == []
    assert parser.parse("title: Missing url\ncategories: [starlight]\n") == []


def test_fetch_showcase_candidates_downloads_yaml_files_only() -> None:
    listing_url = f"https://api.github.com/{ASTRO_SHOWCASE_PATH}"
    downloads: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url == listing_url:
            return httpx.Response(
                200,
                json=[
                    {"name": "athena.yml", "download_url": "https://raw.example/athena.yml"},
                    {"name": "portfolio.yml", "download_url": "https://raw.example/portfolio.yml"},
                    {"name": "broken.yml", "download_url": "https://raw.example/broken.yml"},
                    {"name": "README.md", "download_url": "https://raw.example/README.md"},
                    {"name": "nested", "type": "dir", "download_url": None},
                ],
            )
        downloads.append(url)
        if url.endswith("athena.yml"):
            return httpx.Response(200, text=STARLIGHT_SITE)
        if url.endswith("portfolio.yml"):
            return httpx.Response(200, text=OTHER_SITE)
        return httpx.Response(500)

    client = GitHubClient(config=get_github_config(), client_factory=make_client_factory(handler))
    items = asyncio.run(fetch_showcase_candidates(client, path=ASTRO_SHOWCASE_PATH))

    assert [item.title for item in items] == ["Athena OS"]
    assert sorted(downloads) == [
        "https://raw.example/athena.yml",
        "https://raw.example/broken.yml",
        "https://raw.example/portfolio.yml",
    ]


def test_fetch_showcase_candidates_survives_listing_failure() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"message": "API rate limit exceeded"})

    client = GitHubClient(config=get_github_config(), client_factory=make_client_factory(handler))

    assert asyncio.run(fetch_showcase_candidates(client, path=ASTRO_SHOWCASE_PATH)) == []


def test_fetch_showcase_candidates_survives_html_listing() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html><body>Service unavailable</body></html>")

    client = GitHubClient(config=get_github_config(), client_factory=make_client_factory(handler))

    assert asyncio.run(fetch_showcase_candidates(client, path=ASTRO_SHOWCASE_PATH)) == []
