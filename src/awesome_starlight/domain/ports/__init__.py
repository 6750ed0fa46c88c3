"""Domain port definitions for adapters."""

from __future__ import annotations

from .classification import (
    CategorizationService,
    CategorizationServiceError,
    MissingCredentialError,
)
from .fetching import SourceFetchError, SourceParser, SourceSnapshot
from .validation import (
    LinkProbe,
    ProbeError,
    ProbeMethod,
    RepositoryLookup,
    RepositoryMetadataClient,
)

__all__ = [
    "CategorizationService",
    "CategorizationServiceError",
    "LinkProbe",
    "MissingCredentialError",
    "ProbeError",
    "ProbeMethod",
    "RepositoryLookup",
    "RepositoryMetadataClient",
    "SourceFetchError",
    "SourceParser",
    "SourceSnapshot",
]
