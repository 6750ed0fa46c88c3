"""Liveness checks for referenced links.

Two strategies are dispatched by URL shape:

- GitHub repository URLs ask the repository-metadata endpoint, which also lets
  us exclude forks.
- Everything else gets a HEAD probe, retried once as GET when the server
  refuses HEAD, all inside one bounded deadline.

Every failure is treated as "not live" except a rate-limited repository lookup,
which is accepted: dropping a legitimate entry because we ran out of API quota
is worse than keeping one we could not check.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING

from awesome_starlight.domain.model import ValidationVerdict
from awesome_starlight.domain.ports.validation import ProbeError
from awesome_starlight.domain.reconciliation.normalize import extract_repository, normalize_url

if TYPE_CHECKING:
    from collections.abc import Iterable

    from awesome_starlight.domain.ports.validation import (
        LinkProbe,
        RepositoryLookup,
        RepositoryMetadataClient,
    )

log = getLogger(__name__)

DEFAULT_PROBE_TIMEOUT_SECONDS = 6.0
_RETRY_AS_GET = frozenset({HTTPStatus.METHOD_NOT_ALLOWED, HTTPStatus.FORBIDDEN})


class ValidationCache:
    """Run-scoped memo of validation outcomes keyed by normalized URL.

    The in-flight task is stored on first lookup, so concurrent lookups for the
    same URL await one shared check instead of issuing their own.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task[bool]] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and normalize_url(url) in self._tasks

    def get(self, key: str) -> asyncio.Task[bool] | None:
        return self._tasks.get(key)

    def remember(self, key: str, task: asyncio.Task[bool]) -> None:
        self._tasks.setdefault(key, task)

    def verdicts(self) -> list[ValidationVerdict]:
        return [
            ValidationVerdict(url=key, live=task.result())
            for key, task in self._tasks.items()
            if task.done() and not task.cancelled() and task.exception() is None
        ]


def repository_verdict(lookup: RepositoryLookup) -> bool:
    """Apply the liveness policy to a repository-metadata response."""

    if lookup.status_code == HTTPStatus.OK:
        return lookup.fork is False
    if lookup.status_code == HTTPStatus.FORBIDDEN:
        return True
    return False


@dataclass(slots=True)
class LinkValidator:
    repositories: RepositoryMetadataClient
    probe: LinkProbe
    cache: ValidationCache = field(default_factory=ValidationCache)
    probe_timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS

    async def validate(self, url: str | None) -> bool:
        """Return whether ``url`` is live, checking each normalized URL at most once."""

        target = (url or "").strip()
        key = normalize_url(target)
        if not key:
            return False

        task = self.cache.get(key)
        if task is None:
            task = asyncio.create_task(self._check(target), name=f"validate:{key}")
            self.cache.remember(key, task)
        return await task

    async def validate_all(self, urls: Iterable[str | None]) -> list[bool]:
        return list(await asyncio.gather(*(self.validate(url) for url in urls)))

    async def _check(self, url: str) -> bool:
        repository = extract_repository(url)
        if repository is not None:
            return await self._check_repository(*repository)
        return await self._check_link(url)

    async def _check_repository(self, owner: str, repo: str) -> bool:
        try:
            lookup = await self.repositories.fetch_repository(owner, repo)
        except ProbeError as exc:
            log.warning("Error checking GitHub repository %s/%s: %s", owner, repo, exc)
            return False

        if lookup.status_code == HTTPStatus.OK and lookup.fork:
            log.info("Filtered fork: %s/%s", owner, repo)
        elif lookup.status_code == HTTPStatus.FORBIDDEN:
            log.warning("GitHub rate limit hit for %s/%s, keeping entry unchecked", owner, repo)
        return repository_verdict(lookup)

    async def _check_link(self, url: str) -> bool:
        try:
            async with asyncio.timeout(self.probe_timeout_seconds):
                status = await self.probe.probe(url, method="HEAD")
                if status in _RETRY_AS_GET:
                    status = await self.probe.probe(url, method="GET")
        except TimeoutError:
            log.debug("Link timed out after %ss: %s", self.probe_timeout_seconds, url)
            return False
        except ProbeError as exc:
            log.debug("Link unreachable %s: %s", url, exc)
            return False
        return HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES
