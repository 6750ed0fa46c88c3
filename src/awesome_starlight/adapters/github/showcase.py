"""Astro showcase sites tagged for Starlight."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
import yaml
from pydantic import ValidationError

from awesome_starlight.config.github import SHOWCASE_CATEGORY, SHOWCASE_FILE_SUFFIX
from awesome_starlight.domain.model import CandidateItem

from .client import GitHubAPIError
from .schema import ShowcaseDocument

if TYPE_CHECKING:
    from .client import GitHubClient

log = getLogger(__name__)


class ShowcaseParser:
    """Parse one showcase YAML document into at most one candidate."""

    def __init__(self, *, category: str = SHOWCASE_CATEGORY) -> None:
        self._category = category

    def parse(self, document: str) -> list[CandidateItem]:
        try:
            data = yaml.safe_load(document)
        except yaml.YAMLError as exc:
            log.debug("Ignoring malformed showcase file: %s", exc)
            return []
        if not isinstance(data, dict):
            return []
        try:
            showcase = ShowcaseDocument.model_validate(data)
        except ValidationError:
            return []
        if self._category not in showcase.categories:
            return []
        return [CandidateItem.create(title=showcase.title, url=showcase.url)]


async def fetch_showcase_candidates(
    client: GitHubClient,
    *,
    path: str,
    parser: ShowcaseParser | None = None,
) -> list[CandidateItem]:
    """Return Starlight showcase sites; an unreachable listing contributes nothing."""

    active_parser = parser or ShowcaseParser()
    try:
        entries = await client.list_directory(path)
    except (httpx.HTTPError, GitHubAPIError) as exc:
        log.warning("Failed to fetch Astro showcases: %s", exc)
        return []

    urls = [
        entry.download_url
        for entry in entries
        if entry.name.endswith(SHOWCASE_FILE_SUFFIX) and entry.download_url
    ]
    documents = await client.fetch_texts(urls)

    candidates: list[CandidateItem] = []
    for document in documents:
        if document is None:
            continue
        candidates.extend(active_parser.parse(document))
    log.info("Found %s Starlight sites in the Astro showcase", len(candidates))
    return candidates
