"""Public interface for the npm registry adapter."""

from __future__ import annotations

from .client import NpmRegistryClient, NpmRegistryError, fetch_registry_candidates
from .schema import PackageLinks, PackagePayload, SearchResponse

__all__ = [
    "NpmRegistryClient",
    "NpmRegistryError",
    "PackageLinks",
    "PackagePayload",
    "SearchResponse",
    "fetch_registry_candidates",
]
