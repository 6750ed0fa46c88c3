"""Ports used by the link validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

ProbeMethod = Literal["HEAD", "GET"]


class ProbeError(RuntimeError):
    """Raised by adapters when a check could not produce a usable answer."""


@dataclass(frozen=True, slots=True)
class RepositoryLookup:
    """Status of a repository-metadata request; ``fork`` is only known on 200."""

    status_code: int
    fork: bool | None = None


@runtime_checkable
class RepositoryMetadataClient(Protocol):
    """Look up a hosted repository by owner and name."""

    async def fetch_repository(self, owner: str, repo: str) -> RepositoryLookup: ...


@runtime_checkable
class LinkProbe(Protocol):
    """Issue one request against an arbitrary URL and report its final status."""

    async def probe(self, url: str, *, method: ProbeMethod) -> int: ...


__all__ = [
    "LinkProbe",
    "ProbeError",
    "ProbeMethod",
    "RepositoryLookup",
    "RepositoryMetadataClient",
]
